"""Fixed-width bordered panels.

Every response the shell prints is framed like this:

    +-----------------------------------------------+
    | File List                                     |
    +-----------------------------------------------+
    | notes.txt                                     |
    +-----------------------------------------------+

Rendering is pure (lists of strings); the print_* helpers push those lines
through a Rich Console so colour is dropped when output is not a terminal.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console

PANEL_WIDTH = 49
BODY_WIDTH = PANEL_WIDTH - 4
BORDER = "+" + "-" * (PANEL_WIDTH - 2) + "+"

# Styles
BRIGHT = "bright_green"
GREEN = "green"
ASPARAGUS = "color(64)"

_BANNER_ART = (
    ("█ █ █ █▀▀ █   █▀▀ █▀█ █▄ ▄█ █▀▀", BRIGHT),
    ("▀▄▀▄▀ ██▄ █▄▄ █▄▄ █▄█ █ ▀ █ ██▄", GREEN),
)
_WELCOME = ("Welcome to Sayx CLI 4", "Type 'help' for a list of commands.")


def panel_line(text: str) -> str:
    """Frame one line of body text. Longer text is not cut, the frame grows."""
    return f"| {text:<{BODY_WIDTH}} |"


def render_panel(text: str, body: Iterable[str] = ()) -> list[str]:
    """Render a header panel, followed by optional body lines and a footer.

    Without body lines the header's closing border is the footer.
    """
    lines = [BORDER, panel_line(text), BORDER]
    body_lines = [panel_line(b) for b in body]
    if body_lines:
        lines.extend(body_lines)
        lines.append(BORDER)
    return lines


def print_lines(console: Console, lines: Iterable[str], style: str = BRIGHT) -> None:
    # out() skips markup and emoji codes, so user text is echoed verbatim
    for line in lines:
        console.out(line, style=style, highlight=False)


def print_line(console: Console, text: str, style: str = BRIGHT) -> None:
    print_lines(console, [panel_line(text)], style)


def print_border(console: Console) -> None:
    print_lines(console, [BORDER])


def print_header(console: Console, title: str) -> None:
    print_lines(console, render_panel(title))


def print_banner(console: Console) -> None:
    for art, style in _BANNER_ART:
        console.out(art, style=style, highlight=False)
    console.out("")
    print_lines(console, render_panel("Sayx CLI 4", _WELCOME))
