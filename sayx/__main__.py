"""CLI for the sayx shell.

Usage:
    python -m sayx                         # Start the interactive shell
    python -m sayx --no-banner             # Start without the welcome banner
    python -m sayx --prompt "sayx> "       # Show a prompt before each line
    python -m sayx --log-level DEBUG       # Trace dispatch on stderr

Environment:
    SAYX_EDITOR_FILE, SAYX_CALENDAR_CMD, SAYX_PROMPT, SAYX_NO_BANNER,
    SAYX_LOG_LEVEL — defaults for the options above.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from sayx.environment import load_config
from sayx.log import setup_logging
from sayx.panel import print_banner
from sayx.shell import Shell

app = typer.Typer(
    name="sayx",
    help="A small interactive command shell",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)


@app.command()
def main(
    editor_file: Optional[str] = typer.Option(None, "--editor-file", help="File that 'edit' writes to"),
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt shown before each command"),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the welcome banner"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Diagnostic log level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    """Read commands from stdin until 'exit' or end-of-input."""
    config = load_config()
    if editor_file:
        config.editor_file = editor_file
    if prompt is not None:
        config.prompt = prompt
    if no_banner:
        config.banner = False
    if log_level:
        config.log_level = log_level.upper()

    try:
        setup_logging(config.log_level)
    except ValueError:
        error_console.print(f"[red]Invalid log level: {config.log_level}[/red]")
        raise typer.Exit(1)

    if config.banner:
        print_banner(console)

    shell = Shell(console, error_console, sys.stdin, config)
    raise typer.Exit(shell.run())


if __name__ == "__main__":
    app()
