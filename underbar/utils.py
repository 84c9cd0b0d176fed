"""
Shared helpers for the underbar package.

Logging setup lives here so that library modules only ever call
``logging.getLogger(__name__)``; handlers are installed by whoever runs the
program (the demo script, a test, an application) via ``setup_logging``.
"""

import sys
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from underbar.models import UnderbarSettings, get_settings


# Strings and bytes are sequences to Python but values to us
_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_sequence(value: Any) -> bool:
    """True for ordered, indexable containers that are not text."""
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


# ---------- Logging ----------

def setup_logging(settings: Optional[UnderbarSettings] = None) -> logging.Logger:
    """Configure the ``underbar`` logger with a stdout handler.

    Safe to call more than once: the handler is replaced, not duplicated.
    """
    settings = settings or get_settings()

    root = logging.getLogger("underbar")
    for handler in list(root.handlers):
        if getattr(handler, "_underbar_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler._underbar_handler = True
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    root.debug(f"Logging configured at level {settings.log_level}")
    return root
