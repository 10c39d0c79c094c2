"""Shared fixtures: a Shell wired to in-memory streams, run inside tmp_path."""

import io
from dataclasses import dataclass
from typing import Optional

import pytest
from rich.console import Console

from sayx.environment import ShellConfig
from sayx.shell import Shell


@dataclass
class Session:
    """A shell plus the text it wrote to stdout and stderr."""

    shell: Shell
    _out: io.StringIO
    _err: io.StringIO

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()

    def run(self) -> int:
        return self.shell.run()


@pytest.fixture
def session(tmp_path, monkeypatch):
    """Factory: session(input_text, config=None, commands=None) -> Session."""
    monkeypatch.chdir(tmp_path)

    def _make(text: str = "", config: Optional[ShellConfig] = None, commands=None) -> Session:
        out = io.StringIO()
        err = io.StringIO()
        shell = Shell(
            Console(file=out, width=120, color_system=None),
            Console(file=err, width=120, color_system=None),
            io.StringIO(text),
            config or ShellConfig(),
            commands,
        )
        return Session(shell, out, err)

    return _make
