# loudcheck/common/logging.py
from __future__ import annotations

import logging


def resolve_level(level: int | str | None, default: int = logging.INFO) -> int:
    """Map a level name or number to a logging level; unknown names fall back to `default`."""
    if isinstance(level, int):
        return level
    if not level:
        return default
    return logging.getLevelNamesMapping().get(str(level).strip().upper(), default)


def get_logger(name: str = "loudcheck", level: int | str | None = None) -> logging.Logger:
    """
    Return the package logger.
    If the root logger has no handlers yet, we add a basicConfig once.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(resolve_level(level))
    return logger
