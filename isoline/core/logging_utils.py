"""Logging utilities for isoline.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All isoline code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_isoline_root() -> logging.Logger:
    """Ensure the 'isoline' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'isoline' logger.
    """
    iso_root = logging.getLogger('isoline')
    # Only NullHandlers (added by package __init__): replace with a StreamHandler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in iso_root.handlers)
    if not has_non_null:
        for h in list(iso_root.handlers):
            iso_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        iso_root.addHandler(handler)
    iso_root.propagate = False
    return iso_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'isoline' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    iso_root = _ensure_isoline_root()
    lvl = _to_level(level)
    iso_root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font manager scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a configured logger under the 'isoline' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is set to NOTSET so it inherits from the 'isoline' parent configured via
    configure_logging().
    """
    _ensure_isoline_root()
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
