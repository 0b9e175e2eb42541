from __future__ import annotations

import logging
import sys
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> Optional[int]:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName returns "Level X" for names it does not know
    return resolved if isinstance(resolved, int) else None


def setup_logger(name: Optional[str] = None, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to `name` (root when None) and set its level.

    Calling it again only updates the level; handlers are not duplicated.
    Unknown level names fall back to INFO with a warning.
    """
    logger = logging.getLogger(name)
    resolved = _resolve_level(level)
    logger.setLevel(logging.INFO if resolved is None else resolved)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if resolved is None:
        logger.warning("Unknown log level %r, using INFO", level)
    return logger
