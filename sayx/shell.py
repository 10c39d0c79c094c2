"""The sayx read-eval-print loop.

Data flow per iteration:
1. Read one line from the input stream (None on end-of-input)
2. Parse it into (command, argument)
3. Look the command up in the table; check its argument requirement
4. Run the handler; report any CommandError and carry on

The loop ends on `exit` or end-of-input, both with status 0.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from sayx.commands import load_commands
from sayx.environment import ShellConfig
from sayx.errors import CommandError, ShellExit
from sayx.models import MAX_READ_ERRORS, CommandInfo, ShellContext
from sayx.panel import ASPARAGUS, print_border, print_line
from sayx.parser import parse_line

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130

TRUNCATED = "Warning: input too long, truncated."
TOO_LONG = "Error: Input too long."


class Shell:
    """Reads commands from a stream and dispatches them.

    Args:
        console: Where results go.
        error_console: Where error reports go.
        stdin: Input stream; defaults to sys.stdin.
        config: Runtime settings; defaults to ShellConfig().
        commands: Command table; defaults to the registered commands.
    """

    def __init__(
        self,
        console: Console,
        error_console: Console,
        stdin: Optional[TextIO] = None,
        config: Optional[ShellConfig] = None,
        commands: Optional[dict[str, CommandInfo]] = None,
    ) -> None:
        self.ctx = ShellContext(
            console=console,
            error_console=error_console,
            stdin=stdin if stdin is not None else sys.stdin,
            config=config or ShellConfig(),
            commands=dict(commands) if commands is not None else load_commands(),
        )

    @property
    def commands(self) -> dict[str, CommandInfo]:
        return self.ctx.commands

    def read_line(self) -> Optional[str]:
        """Read one line without its terminator, or None at end-of-input."""
        if self.ctx.config.prompt:
            self.ctx.console.out(self.ctx.config.prompt, end="", highlight=False)
        raw = self.ctx.stdin.readline()
        if raw == "":
            return None
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        return raw

    def report(self, message: str) -> None:
        """Show an error line on the error console and close the panel."""
        print_line(self.ctx.error_console, message, ASPARAGUS)
        print_border(self.ctx.console)

    def dispatch(self, line: str) -> None:
        """Parse and run one line. Blank lines do nothing.

        Raises:
            ShellExit: When the command asks the loop to stop.
        """
        parsed = parse_line(line)
        if not parsed.command:
            return

        info = self.commands.get(parsed.command)
        if info is None:
            logger.debug("unknown command %r", parsed.command)
            self.report(f"Error: Unknown command: {parsed.command}")
            return

        if parsed.truncated:
            if info.exact_argument:
                self.report(TOO_LONG)
                return
            self.report(TRUNCATED)

        if info.requires_argument and not parsed.argument:
            self.report(info.argument_error)
            return

        logger.debug("dispatch %s argument=%r", info.name, parsed.argument)
        try:
            info.handler(self.ctx, parsed.argument)
        except CommandError as e:
            logger.info("%s failed: %s", info.name, e.message)
            self.report(e.message)

    def run(self) -> int:
        """Loop until `exit` or end-of-input. Returns the exit status."""
        read_errors = 0
        while True:
            try:
                try:
                    line = self.read_line()
                except (OSError, UnicodeDecodeError) as e:
                    read_errors += 1
                    logger.warning("read failed (%d in a row): %s", read_errors, e)
                    print_line(self.ctx.error_console, f"Error reading input: {e}", ASPARAGUS)
                    if read_errors >= MAX_READ_ERRORS:
                        return 1
                    continue
                read_errors = 0

                if line is None:
                    logger.debug("end of input")
                    return 0

                self.dispatch(line)
            except ShellExit as e:
                return e.code
            except KeyboardInterrupt:
                self.ctx.console.out("")
                return EXIT_INTERRUPTED
