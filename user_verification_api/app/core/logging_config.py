"""
Logging configuration for the scripted run and the API.

stdout belongs to the script verdict: ``run.py`` prints exactly one
line there, ``Success!`` or ``Error: <message>``.  Every log record
therefore goes to stderr, optionally mirrored into ``settings.log_file``.
With the default ``WARNING`` level a passing run writes nothing to
stderr at all; only a failed script step (logged by the fake HTTP
client) shows up.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", logfile: Optional[str] = None) -> None:
    """Send log records to stderr, never to stdout.

    Both ``run.main`` and ``create_app`` call this; whichever runs first
    wins and later calls leave the root logger alone.  Under pytest the
    capture handlers already sit on the root logger, so nothing is
    installed there either.

    ``level`` is a level name such as ``"INFO"``; names ``logging`` does
    not know fall back to ``WARNING``.  ``logfile`` adds a UTF-8 copy
    of the stderr stream.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root.addHandler(stderr_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
