"""Diagnostic logging for sayx.

Modules log through logging.getLogger(__name__); this wires the root of the
`sayx` logger tree to a RichHandler on stderr. User-facing output never goes
through here, it is printed by the shell's consoles.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sayx"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the `sayx` logger once; repeated calls only change the level.

    Raises:
        ValueError: If `level` is not a known logging level name.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Avoid duplicate handlers when called again (tests, re-entry)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
