"""Commands that only print: help, print and exit."""

from __future__ import annotations

from sayx.errors import ShellExit
from sayx.models import ShellContext
from sayx.panel import GREEN, print_border, print_header, print_line, print_lines, render_panel

FAREWELL = "Exiting Sayx CLI..."


def help_lines(ctx: ShellContext) -> list[str]:
    """One '<usage>: <description>' line per command, in table order."""
    return [f"{info.synopsis}: {info.description}" for info in ctx.commands.values()]


def display_help(ctx: ShellContext, argument: str = "") -> None:
    print_header(ctx.console, "Help")
    for line in help_lines(ctx):
        print_line(ctx.console, line, GREEN)
    print_border(ctx.console)


def print_message(ctx: ShellContext, message: str) -> None:
    """Echo the argument verbatim; an empty argument gives an empty panel."""
    print_lines(ctx.console, render_panel(message))


def exit_shell(ctx: ShellContext, argument: str = "") -> None:
    """Farewell line and footer border, then leave the loop."""
    print_line(ctx.console, FAREWELL)
    print_border(ctx.console)
    raise ShellExit(0)
