"""Data models for the sayx shell.

ParsedCommand, CommandInfo, ShellContext and the input bounds — the typed
structures that flow through parser → shell → commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, TextIO

from rich.console import Console

if TYPE_CHECKING:
    from sayx.environment import ShellConfig

# Input bounds. Anything longer is truncated and the user is warned.
MAX_COMMAND_LENGTH = 20
MAX_ARG_LENGTH = 100
MAX_LINE_LENGTH = MAX_COMMAND_LENGTH + MAX_ARG_LENGTH + 2

# Consecutive read failures tolerated before the loop gives up.
MAX_READ_ERRORS = 5


@dataclass(frozen=True)
class ParsedCommand:
    """One input line split into its command token and free-text argument."""

    command: str = ""
    argument: str = ""
    truncated: bool = False


@dataclass
class ShellContext:
    """Everything a command handler may touch.

    `stdin` is the raw input stream; commands that read their own input
    (calc, edit) read from it directly rather than from the argument.
    """

    console: Console
    error_console: Console
    stdin: TextIO
    config: ShellConfig
    commands: dict[str, CommandInfo]


Handler = Callable[[ShellContext, str], None]


@dataclass(frozen=True)
class CommandInfo:
    """A single entry in the command table."""

    name: str
    handler: Handler
    description: str
    usage: str = ""
    # Message shown when the command needs an argument and got none.
    argument_error: Optional[str] = None
    # Argument names a path; a truncated one is refused, never acted on.
    exact_argument: bool = False

    @property
    def requires_argument(self) -> bool:
        return self.argument_error is not None

    @property
    def synopsis(self) -> str:
        return self.usage or self.name
