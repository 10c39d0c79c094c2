"""The `edit` command: a write-only scratch editor.

Everything typed until end-of-input (Ctrl+D) is saved verbatim to the
configured editor file in the current directory, replacing what was there.
"""

from __future__ import annotations

import logging

from sayx.errors import CommandError, describe
from sayx.models import ShellContext
from sayx.panel import ASPARAGUS, print_border, print_header, print_line

logger = logging.getLogger(__name__)


def text_editor(ctx: ShellContext, argument: str = "") -> None:
    target = ctx.config.editor_file
    print_header(ctx.console, "Text Editor")
    print_line(ctx.console, "Launching Text Editor...", ASPARAGUS)
    print_line(ctx.console, "Enter text below (press Ctrl+D to save and exit):")

    try:
        f = open(target, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise CommandError(f"Error opening file: {describe(e)}") from e

    written = 0
    with f:
        try:
            for chunk in iter(ctx.stdin.readline, ""):
                f.write(chunk)
                written += len(chunk)
        except UnicodeDecodeError as e:
            raise CommandError(f"Error reading input: {e}") from e
        except OSError as e:
            raise CommandError(f"Error writing file: {describe(e)}") from e

    logger.debug("editor wrote %d characters to %s", written, target)
    print_line(ctx.console, f"Text saved to '{target}'.")
    print_border(ctx.console)
