"""Exceptions raised by sayx commands and caught by the shell loop."""

from __future__ import annotations


class SayxError(Exception):
    """Base class for sayx errors."""


class CommandError(SayxError):
    """A command failed in a way the user should be told about.

    The message is shown verbatim inside the panel; the loop carries on.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ShellExit(SayxError):
    """Raised by the `exit` command to leave the read loop."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(f"exit {code}")
        self.code = code


def describe(exc: Exception) -> str:
    """Short reason for an OS or path error, in the style of perror()."""
    return getattr(exc, "strerror", None) or str(exc)
