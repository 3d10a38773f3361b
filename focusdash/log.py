"""Application logging.

Log files live under ``~/Library/Application Support/FocusDash/logs``.
Modules log through ``logging.getLogger(__name__)``; everything under the
``focusdash`` namespace ends up in the rotating file and on stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .settings import APP_SUPPORT_DIR

LOGGER_NAME = "focusdash"
LOG_DIR = APP_SUPPORT_DIR / "logs"
LOG_FILE = "focusdash.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(
    level: str | int = "INFO",
    *,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Attach file + stderr handlers to the ``focusdash`` logger.

    Safe to call more than once; handlers are only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    directory = log_dir or LOG_DIR
    try:
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            directory / LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError:
        # Read-only home, sandbox, etc.: fall back to stderr only
        pass

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.propagate = False
    return logger
