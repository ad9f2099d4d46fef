"""Logging utilities for navdecomp.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All navdecomp code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT = 'navdecomp'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_HANDLER_NAME = 'navdecomp.stdout'


def _is_own_handler(h: logging.Handler) -> bool:
    return h.get_name() == _HANDLER_NAME


def _ensure_root() -> logging.Logger:
    """Ensure the 'navdecomp' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'navdecomp' logger.
    """
    root = logging.getLogger(_ROOT)
    # The package __init__ only installs a NullHandler; swap it for a real one.
    # Handlers attached by other tools (e.g. test log capture) are left alone.
    if not any(_is_own_handler(h) for h in root.handlers):
        for h in list(root.handlers):
            if isinstance(h, logging.NullHandler):
                root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'navdecomp' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    # matplotlib is very chatty at DEBUG (font cache scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a configured logger under the 'navdecomp' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is set to NOTSET so it inherits from the 'navdecomp' parent configured via
    configure_logging().
    """
    _ensure_root()
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f'{_ROOT}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
