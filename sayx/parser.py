"""Split an input line into a command token and a free-text argument.

The command is the first whitespace-delimited token. The argument is the
rest of the line after the first whitespace run, kept verbatim: internal
and trailing spaces survive. Overlong parts are cut to their bounds and the
result is flagged as truncated.
"""

from __future__ import annotations

import logging
import re

from sayx.models import MAX_ARG_LENGTH, MAX_COMMAND_LENGTH, MAX_LINE_LENGTH, ParsedCommand

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"\s+")


def _clip(value: str, limit: int, what: str) -> tuple[str, bool]:
    if len(value) <= limit:
        return value, False
    logger.warning("%s is %d characters, truncated to %d", what, len(value), limit)
    return value[:limit], True


def parse_line(line: str) -> ParsedCommand:
    """Parse one input line (without its terminator) into a ParsedCommand.

    Examples:
        'help'                 → ('help', '')
        'print  hello  world ' → ('print', 'hello  world ')
        '   '                  → ('', '')
    """
    line, line_cut = _clip(line, MAX_LINE_LENGTH, "input line")

    parts = _SEPARATOR_RE.split(line.lstrip(), maxsplit=1)
    command = parts[0]
    argument = parts[1] if len(parts) > 1 else ""

    command, command_cut = _clip(command, MAX_COMMAND_LENGTH, "command")
    argument, argument_cut = _clip(argument, MAX_ARG_LENGTH, "argument")

    return ParsedCommand(
        command=command,
        argument=argument,
        truncated=line_cut or command_cut or argument_cut,
    )
