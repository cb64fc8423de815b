# app/utils/logging.py
import logging
import sys

from app.config import settings

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

def _resolve_level(name: str) -> int:
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO

def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a single stderr handler to the service logger.
    Safe to call more than once; later calls only adjust the level.
    """
    log = logging.getLogger("receipt_points")
    lvl = _resolve_level(level or settings.LOG_LEVEL)
    log.setLevel(lvl)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = LOG_FORMAT_DEBUG if lvl == logging.DEBUG else LOG_FORMAT
        handler.setFormatter(logging.Formatter(fmt))
        log.addHandler(handler)
    return log

logger = configure_logging()
