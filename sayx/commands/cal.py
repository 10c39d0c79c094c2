"""The `calendar` command: run the platform calendar utility (cal)."""

from __future__ import annotations

import logging
import subprocess

from sayx.errors import CommandError, describe
from sayx.models import ShellContext
from sayx.panel import ASPARAGUS, BRIGHT, print_border, print_header, print_line

logger = logging.getLogger(__name__)

CALENDAR_TIMEOUT_S = 10


def show_calendar(ctx: ShellContext, argument: str = "") -> None:
    cmd = ctx.config.calendar_command
    print_header(ctx.console, "Calendar")
    print_line(ctx.console, "Launching Calendar...", ASPARAGUS)

    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=CALENDAR_TIMEOUT_S,
        )
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"Error launching calendar: timed out after {CALENDAR_TIMEOUT_S}s") from e
    except OSError as e:
        logger.info("could not start %s: %s", cmd, e)
        raise CommandError(f"Error launching calendar: {describe(e)}") from e

    if proc.stdout:
        ctx.console.out(proc.stdout.rstrip("\n"), style=BRIGHT, highlight=False)

    if proc.returncode != 0:
        reason = proc.stderr.strip().splitlines()[0] if proc.stderr.strip() else f"exit code {proc.returncode}"
        raise CommandError(f"Error launching calendar: {reason}")

    print_border(ctx.console)
