"""
Package logger setup for applications embedding xasprep.

The solvers only log at DEBUG, to say why a result is None or which
degenerate branch was taken. Nothing is printed unless setup_logging is
called or the host application configures the 'xasprep' logger itself.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "xasprep"
LEVEL_ENV_VAR = "XASPREP_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Level from an int, a level name or a digit string; default otherwise"""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    text = str(level).strip().upper()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text)
    return resolved if isinstance(resolved, int) else default


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a single handler to the 'xasprep' logger and set its level.

    Args:
        level: Logging level or level name. When None, XASPREP_LOG_LEVEL is
            read, falling back to INFO.
        log_file: Write to this file instead of stderr.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR)
    level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
