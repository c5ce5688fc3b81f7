# mediacompat/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

from mediacompat.common.settings import get_settings


def get_logger(name: str = "mediacompat", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a logger for the converter modules.
    If no handlers are set, we add a basicConfig once. When no level is given
    the configured Settings.log_level is used.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
