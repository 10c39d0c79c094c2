"""The `todo` command.

There is no todo storage; the command only shows its panel. It is kept in
the table as the place a real todo list would plug in.
"""

from __future__ import annotations

from sayx.models import ShellContext
from sayx.panel import ASPARAGUS, print_border, print_header, print_line


def todo_list(ctx: ShellContext, argument: str = "") -> None:
    print_header(ctx.console, "Todo List")
    print_line(ctx.console, "Launching Todo List...", ASPARAGUS)
    print_border(ctx.console)
