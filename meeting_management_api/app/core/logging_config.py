"""
Logging configuration for the Meeting Management API.

``setup_logging`` attaches a console handler (and, when a log file is
configured, a file handler) to the root logger.  Every module then
logs through ``logging.getLogger(__name__)`` so records carry the
dotted module path, e.g. ``meeting_management_api.app.services.meeting_service``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (``"DEBUG"``, ``"INFO"``, ...).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  Relative paths are
        resolved against the current working directory.
    debug : bool
        Force ``DEBUG`` regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest and repeated create_app() calls install handlers first.
        return

    numeric_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging configured at level %s", logging.getLevelName(numeric_level))
