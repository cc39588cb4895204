"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/_logging.py

Console logging for applications embedding varmotif. Library modules only
call logging.getLogger(__name__); nothing here runs on import.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def setup_console_logging(level: str = "INFO") -> None:
    """Install a single RichHandler on the root logger (idempotent)."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level.upper())

    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level.upper())
    root.addHandler(handler)
