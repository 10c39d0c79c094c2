"""Runtime configuration for the sayx shell.

Built from SAYX_* environment variables; the CLI layers its options on top.
Nothing is ever written back.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_EDITOR_FILE = "sayxfile"
DEFAULT_CALENDAR_COMMAND = ("cal",)
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class ShellConfig:
    """Settings a shell run needs."""

    editor_file: str = DEFAULT_EDITOR_FILE
    calendar_command: list[str] = field(default_factory=lambda: list(DEFAULT_CALENDAR_COMMAND))
    prompt: str = ""
    banner: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def _calendar_command(raw: Optional[str]) -> list[str]:
    """Split SAYX_CALENDAR_CMD; an empty or unparsable value means the default."""
    if not raw:
        return list(DEFAULT_CALENDAR_COMMAND)
    try:
        parts = shlex.split(raw)
    except ValueError:
        return list(DEFAULT_CALENDAR_COMMAND)
    return parts or list(DEFAULT_CALENDAR_COMMAND)


def load_config(env: Optional[Mapping[str, str]] = None) -> ShellConfig:
    """Build a ShellConfig from the environment.

    Args:
        env: Mapping to read instead of os.environ (tests pass a dict).
    """
    env = os.environ if env is None else env
    return ShellConfig(
        editor_file=env.get("SAYX_EDITOR_FILE") or DEFAULT_EDITOR_FILE,
        calendar_command=_calendar_command(env.get("SAYX_CALENDAR_CMD")),
        prompt=env.get("SAYX_PROMPT", ""),
        banner=env.get("SAYX_NO_BANNER", "").strip().lower() not in _TRUTHY,
        log_level=(env.get("SAYX_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
