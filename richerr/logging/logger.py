"""Logging setup built on loguru."""

from __future__ import annotations

import logging
import sys
from contextlib import suppress

from loguru import logger

from richerr.config import load_config

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

# silent until the host opts in through setup_logging
logger.disable("richerr")

_LOGURU_DEFAULT_HANDLER = 0
_handler_ids: list[int] = []


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None, *, intercept_stdlib: bool = True) -> int:
    """Install the stderr sink and return its handler id.

    Replaces loguru's default stderr sink and sinks from earlier calls.
    Sinks added by the host are left in place.
    """
    config = load_config()
    level = (level or config.log_level).upper()
    if config.debug_logging:
        level = "DEBUG"

    for handler_id in (_LOGURU_DEFAULT_HANDLER, *_handler_ids):
        with suppress(ValueError):
            logger.remove(handler_id)
    _handler_ids.clear()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
    _handler_ids.append(handler_id)
    logger.enable("richerr")

    if intercept_stdlib:
        logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    return handler_id


__all__ = ["logger", "setup_logging"]
