"""Package logger setup.

Modules log through stdlib loggers under the ``rpcretry`` namespace
(``rpcretry.retry`` for policies). Nothing is emitted unless the application
configures logging, either its own way or through configure_logging().

Example:
    >>> from rpcretry.foundation.logging import configure_logging
    >>> configure_logging("DEBUG")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import TextIO

ROOT_LOGGER = "rpcretry"

_HANDLER_ATTR = "_rpcretry_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the rpcretry namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the rpcretry logger.
    
    Level and format default to LoggingSettings. Calling again replaces the
    handler installed by a previous call instead of stacking another one.
    
    Raises:
        ValueError: Unknown level name
    """
    from rpcretry.foundation.config import get_settings
    
    cfg = get_settings().logging
    name = (level or cfg.level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    
    logger = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(h)
    
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or cfg.format))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
