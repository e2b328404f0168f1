"""Application log file under platformdirs' user_log_dir.

Only commands call :func:`get_logger`; every other module logs through
``logging.getLogger(__name__)`` and reaches the same file because all of them
live under the ``smartdash_cli`` namespace.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "smartdash_cli"
LOG_FILE = "smartdash.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger() -> logging.Logger:
    """Return the ``smartdash_cli`` logger, attaching the rotating file handler once."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers):
            logger.addHandler(_file_handler(Path(user_log_dir(LOGGER_NAME))))
        logger.setLevel(logging.DEBUG)
        # Keep records off stderr; the console belongs to rich output.
        logger.propagate = False
        _logger = logger
    return _logger
