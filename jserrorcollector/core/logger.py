"""
Logging setup.
Uses loguru. The package is disabled in loguru on import, so it stays silent
until the application calls setup_logging(); host sinks are left alone.
"""
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import settings

PACKAGE = "jserrorcollector"

# handler ids added by setup_logging(), removed again on the next call
_handler_ids: List[int] = []


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Enable package logging with console (and optionally file) sinks"""
    level = level or settings.LOG_LEVEL
    log_file = log_file if log_file is not None else settings.LOG_FILE

    reset_logging()

    _handler_ids.append(logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level,
        filter=PACKAGE,
    ))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(logger.add(
            str(log_path),
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
            filter=PACKAGE,
            enqueue=True,
        ))

    logger.enable(PACKAGE)
    logger.debug(f"[JSErrorCollector] logging configured (level={level})")


def reset_logging():
    """Remove the sinks added by setup_logging() and silence the package again"""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable(PACKAGE)


__all__ = ["logger", "setup_logging", "reset_logging"]
