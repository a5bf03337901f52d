"""
Logging setup for the Album API.

Application modules log through ``logging.getLogger(__name__)``; the
access and error logs come from uvicorn.  ``setup_logging`` gives all
of them one destination: the root logger, with a console handler and,
when ``LOG_FILE`` is set, a file handler, both using ``LOG_FORMAT``.
uvicorn's own handlers are removed so its records propagate to the
root logger instead of being printed in uvicorn's format.  ``run.py``
starts uvicorn with ``log_config=None`` so that this stays in place.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route uvicorn's loggers to it.

    Does nothing when the root logger already has handlers, e.g. when
    ``create_app`` is called a second time or under pytest.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _build_handlers(logfile):
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
