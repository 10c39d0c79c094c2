"""Filesystem commands: list, add, del, view.

All paths are relative to the process working directory.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from sayx.errors import CommandError, describe
from sayx.models import ShellContext
from sayx.panel import BRIGHT, print_border, print_header, print_line

logger = logging.getLogger(__name__)

# Permissions for new directories, before the umask is applied.
DIRECTORY_MODE = 0o777

_CHUNK_SIZE = 64 * 1024


def list_files(ctx: ShellContext, argument: str = "") -> None:
    """Print every entry of the current directory, sorted by name."""
    print_header(ctx.console, "File List")
    try:
        names = sorted(entry.name for entry in Path(".").iterdir())
    except OSError as e:
        logger.info("listing %s failed: %s", Path.cwd(), e)
        raise CommandError(f"Unable to open directory: {describe(e)}") from e

    for name in names:
        print_line(ctx.console, name)
    print_border(ctx.console)


def create_directory(ctx: ShellContext, name: str) -> None:
    print_header(ctx.console, "Create Directory")
    try:
        Path(name).mkdir(mode=DIRECTORY_MODE)
    except (OSError, ValueError) as e:
        raise CommandError(f"Error creating directory: {describe(e)}") from e

    print_line(ctx.console, f"Directory '{name}' created.")
    print_border(ctx.console)


def remove_item(ctx: ShellContext, name: str) -> None:
    """Remove a file, a symlink or an empty directory."""
    print_header(ctx.console, "Remove Item")
    path = Path(name)
    try:
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    except (OSError, ValueError) as e:
        raise CommandError(f"Error removing item: {describe(e)}") from e

    print_line(ctx.console, f"Item '{name}' removed.")
    print_border(ctx.console)


def file_viewer(ctx: ShellContext, filename: str) -> None:
    """Stream a file to the console between the header and the border.

    Bytes that are not valid UTF-8 are shown as U+FFFD rather than failing.
    """
    print_header(ctx.console, "File Viewer")
    try:
        f = open(filename, "rb")
    except (OSError, ValueError) as e:
        raise CommandError(f"Error opening file: {describe(e)}") from e

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    last = "\n"
    with f:
        try:
            for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
                text = decoder.decode(chunk)
                if text:
                    ctx.console.out(text, style=BRIGHT, highlight=False, end="")
                    last = text[-1]
        except OSError as e:
            raise CommandError(f"Error reading file: {describe(e)}") from e
    tail = decoder.decode(b"", final=True)
    if tail:
        ctx.console.out(tail, style=BRIGHT, highlight=False, end="")
        last = tail[-1]

    # Keep the footer on its own line
    if last != "\n":
        ctx.console.out("")
    print_border(ctx.console)
