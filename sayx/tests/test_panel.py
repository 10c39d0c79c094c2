"""Tests for panel rendering."""

import io

from rich.console import Console

from sayx.panel import BORDER, PANEL_WIDTH, panel_line, print_banner, render_panel


def test_border_width():
    assert len(BORDER) == PANEL_WIDTH
    assert BORDER.startswith("+-") and BORDER.endswith("-+")


def test_panel_line_pads_to_width():
    line = panel_line("File List")
    assert len(line) == PANEL_WIDTH
    assert line.startswith("| File List ")
    assert line.endswith(" |")


def test_panel_line_does_not_cut_long_text():
    text = "z" * 60
    assert panel_line(text) == f"| {text} |"


def test_render_panel_header_only():
    assert render_panel("Help") == [BORDER, panel_line("Help"), BORDER]


def test_render_panel_with_body():
    lines = render_panel("Title", ["one", "two"])
    assert lines == [
        BORDER,
        panel_line("Title"),
        BORDER,
        panel_line("one"),
        panel_line("two"),
        BORDER,
    ]


def test_empty_text_gives_empty_body():
    assert render_panel("")[1] == "| " + " " * (PANEL_WIDTH - 4) + " |"


def test_banner():
    buf = io.StringIO()
    print_banner(Console(file=buf, width=120, color_system=None))
    text = buf.getvalue()
    assert "Sayx CLI 4" in text
    assert "Type 'help' for a list of commands." in text
