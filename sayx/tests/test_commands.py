"""Tests for the individual commands, driven through the shell."""

import os
import sys
from pathlib import Path

import pytest

from sayx.commands.calculator import InvalidOperator, calculate, evaluate, parse_expression
from sayx.environment import ShellConfig
from sayx.panel import panel_line


# --- help / todo ---

def test_help_lists_every_command(session):
    s = session("help\n")
    s.run()
    for line in (
        "help: Display this help message",
        "list: List files",
        "add [name]: Create directory",
        "del [name]: Remove file/directory",
        "edit: Launch Text Editor",
        "calc: Launch Calculator",
        "view [file]: View file contents",
        "calendar: Launch Calendar",
        "todo: Launch Todo List",
        "print [message]: Print a message",
        "exit: Exit the program",
    ):
        assert panel_line(line) in s.out


def test_todo_shows_panel_only(session, tmp_path):
    s = session("todo\n")
    s.run()
    assert "Todo List" in s.out
    assert "Launching Todo List..." in s.out
    assert list(tmp_path.iterdir()) == []


# --- list / add / del ---

def test_list_shows_directory_entries(session, tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a_dir").mkdir()
    s = session("list\n")
    s.run()
    out = s.out
    assert panel_line("a_dir") in out
    assert panel_line("b.txt") in out
    assert out.index("a_dir") < out.index("b.txt")


def test_add_creates_directory(session, tmp_path):
    s = session("add my projects\n")
    s.run()
    assert (tmp_path / "my projects").is_dir()
    assert "Directory 'my projects' created." in s.out


def test_add_existing_directory_reports_error(session, tmp_path):
    (tmp_path / "taken").mkdir()
    s = session("add taken\nprint alive\n")
    s.run()
    assert "Error creating directory: File exists" in s.err
    assert "alive" in s.out


def test_del_removes_file(session, tmp_path):
    (tmp_path / "old.txt").write_text("x")
    s = session("del old.txt\n")
    s.run()
    assert not (tmp_path / "old.txt").exists()
    assert "Item 'old.txt' removed." in s.out


def test_del_removes_empty_directory(session, tmp_path):
    (tmp_path / "empty").mkdir()
    s = session("del empty\n")
    s.run()
    assert not (tmp_path / "empty").exists()


def test_del_non_empty_directory_reports_error(session, tmp_path):
    (tmp_path / "full").mkdir()
    (tmp_path / "full" / "f").write_text("x")
    s = session("del full\n")
    s.run()
    assert (tmp_path / "full").is_dir()
    assert "Error removing item:" in s.err


def test_del_missing_reports_error(session):
    s = session("del ghost\n")
    s.run()
    assert "Error removing item: No such file or directory" in s.err


# --- view ---

def test_view_prints_file(session, tmp_path):
    (tmp_path / "notes.txt").write_text("first line\nsecond line\n", encoding="utf-8")
    s = session("view notes.txt\n")
    s.run()
    assert "first line\nsecond line\n" in s.out
    assert "File Viewer" in s.out


def test_view_without_trailing_newline_keeps_footer_separate(session, tmp_path):
    (tmp_path / "short").write_text("no newline", encoding="utf-8")
    s = session("view short\n")
    s.run()
    assert "no newline\n+" in s.out


def test_view_replaces_invalid_bytes(session, tmp_path):
    (tmp_path / "bin").write_bytes(b"ok\xff\n")
    s = session("view bin\n")
    s.run()
    assert "ok�" in s.out


def test_view_missing_file_reports_and_continues(session):
    s = session("view somefile.txt\nprint next\n")
    assert s.run() == 0
    assert "Error opening file: No such file or directory" in s.err
    assert "next" in s.out


# --- edit ---

def test_edit_saves_rest_of_input(session, tmp_path):
    s = session("edit\nline one\n  line two\n")
    assert s.run() == 0
    assert (tmp_path / "sayxfile").read_text(encoding="utf-8") == "line one\n  line two\n"
    assert "Text saved to 'sayxfile'." in s.out


def test_edit_overwrites_existing_file(session, tmp_path):
    (tmp_path / "sayxfile").write_text("old content that is long")
    s = session("edit\nnew\n")
    s.run()
    assert (tmp_path / "sayxfile").read_text() == "new\n"


def test_edit_uses_configured_file(session, tmp_path):
    s = session("edit\nhi\n", config=ShellConfig(editor_file="notes.md"))
    s.run()
    assert (tmp_path / "notes.md").read_text() == "hi\n"


def test_edit_unwritable_target_reports_error(session, tmp_path):
    (tmp_path / "sayxfile").mkdir()
    s = session("edit\ntext\n")
    s.run()
    assert "Error opening file:" in s.err


# --- calc ---

def test_calc_addition(session):
    s = session("calc\n5 + 3\n")
    s.run()
    assert panel_line("Result: 8.00") in s.out


def test_calc_division_by_zero(session):
    s = session("calc\n5 / 0\n")
    s.run()
    assert "Error: Division by zero." in s.err
    assert "Result:" not in s.out


def test_calc_invalid_operator(session):
    s = session("calc\n5 & 3\n")
    s.run()
    assert "Error: Invalid operator." in s.err


def test_calc_invalid_input(session):
    s = session("calc\nfive plus three\nprint ok\n")
    assert s.run() == 0
    assert "Error: Invalid input." in s.err
    assert "ok" in s.out


def test_calc_end_of_input_is_invalid_input(session):
    s = session("calc\n")
    assert s.run() == 0
    assert "Error: Invalid input." in s.err


def test_calc_ignores_argument(session):
    s = session("calc 1 + 1\n2 * 3\n")
    s.run()
    assert panel_line("Result: 6.00") in s.out


@pytest.mark.parametrize("text, expected", [
    ("5+3", 8.0),
    ("10 - 4", 6.0),
    ("-2 * 3.5", -7.0),
    ("7 / 2", 3.5),
    ("5 - -3", 8.0),
    ("1e3 + 1", 1001.0),
])
def test_calculate(text, expected):
    assert calculate(text) == pytest.approx(expected)


def test_parse_expression_rejects_garbage():
    with pytest.raises(ValueError):
        parse_expression("5 +")


def test_evaluate_rejects_unknown_operator():
    with pytest.raises(InvalidOperator):
        evaluate(5, "%", 3)


# --- calendar ---

def test_calendar_prints_command_output(session):
    cmd = [sys.executable, "-c", "print('October 2026')"]
    s = session("calendar\n", config=ShellConfig(calendar_command=cmd))
    s.run()
    assert "Launching Calendar..." in s.out
    assert "October 2026" in s.out


def test_calendar_missing_program_reports_error(session):
    cmd = ["sayx-no-such-calendar-program"]
    s = session("calendar\nprint alive\n", config=ShellConfig(calendar_command=cmd))
    assert s.run() == 0
    assert "Error launching calendar:" in s.err
    assert "alive" in s.out


def test_calendar_failing_program_reports_stderr(session):
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('bad month\\n'); sys.exit(1)"]
    s = session("calendar\n", config=ShellConfig(calendar_command=cmd))
    s.run()
    assert "Error launching calendar: bad month" in s.err


# --- working directory ---

def test_commands_act_on_current_directory(session, tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    s = session("add inner\n")
    os.chdir(sub)
    s.run()
    assert (sub / "inner").is_dir()
    assert not Path(tmp_path / "inner").exists()


# --- Unusable path names ---

@pytest.mark.parametrize("line, message", [
    ("add a\x00b", "Error creating directory: embedded null byte"),
    ("del a\x00b", "Error removing item: embedded null byte"),
    ("view a\x00b", "Error opening file: embedded null byte"),
])
def test_nul_byte_in_path_is_reported_not_fatal(session, line, message):
    s = session(line + "\nprint alive\n")
    assert s.run() == 0
    assert message in s.err
    assert panel_line("alive") in s.out


# --- Number formats ---

@pytest.mark.parametrize("line, shown", [
    ("0x1.8p1 * 2", "Result: 6.00"),
    ("0X10 + 0", "Result: 16.00"),
    ("inf - 1", "Result: inf"),
    ("-Infinity * 2", "Result: -inf"),
    ("NaN + 1", "Result: nan"),
])
def test_calc_accepts_strtod_number_forms(session, line, shown):
    s = session(f"calc\n{line}\n")
    s.run()
    assert panel_line(shown) in s.out
