"""
Logging configuration shared by both services.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and applies the configured level to the
root and to the ``study_notes_api`` package logger.  Both application
factories call it; only the first call has an effect.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging once per process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured by the other service, uvicorn or pytest.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(numeric_level)
    logging.getLogger("study_notes_api").setLevel(numeric_level)
