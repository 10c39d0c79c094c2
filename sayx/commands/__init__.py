"""Command table for the sayx shell.

Each command is a CommandInfo: a name, a handler taking (ctx, argument), a
help description and, for commands that need an argument, the message shown
when it is missing. The shell looks commands up by exact, case-sensitive
name.

Adding a command:
    register(CommandInfo(name="hello", handler=say_hello, description="Greet"))

`help` is generated from the table, so registered commands show up there.
"""

from __future__ import annotations

from sayx.commands.cal import show_calendar
from sayx.commands.calculator import calculator
from sayx.commands.editor import text_editor
from sayx.commands.files import create_directory, file_viewer, list_files, remove_item
from sayx.commands.messages import display_help, exit_shell, print_message
from sayx.commands.todo import todo_list
from sayx.models import CommandInfo

_REGISTRY: dict[str, CommandInfo] = {}


def register(info: CommandInfo) -> CommandInfo:
    """Add or replace a command in the default table."""
    _REGISTRY[info.name] = info
    return info


def load_commands() -> dict[str, CommandInfo]:
    """A fresh copy of the default table, in registration order."""
    return dict(_REGISTRY)


for _info in (
    CommandInfo("help", display_help, "Display this help message"),
    CommandInfo("list", list_files, "List files"),
    CommandInfo(
        "add", create_directory, "Create directory",
        usage="add [name]", argument_error="Error: Missing directory name.",
        exact_argument=True,
    ),
    CommandInfo(
        "del", remove_item, "Remove file/directory",
        usage="del [name]", argument_error="Error: Missing file or directory name.",
        exact_argument=True,
    ),
    CommandInfo("edit", text_editor, "Launch Text Editor"),
    CommandInfo("calc", calculator, "Launch Calculator"),
    CommandInfo(
        "view", file_viewer, "View file contents",
        usage="view [file]", argument_error="Error: Missing file name.",
        exact_argument=True,
    ),
    CommandInfo("calendar", show_calendar, "Launch Calendar"),
    CommandInfo("todo", todo_list, "Launch Todo List"),
    CommandInfo("print", print_message, "Print a message", usage="print [message]"),
    CommandInfo("exit", exit_shell, "Exit the program"),
):
    register(_info)
