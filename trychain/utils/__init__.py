# This file makes the 'utils' directory a Python package.

"""trychain utilities."""

from .events import subscribe, unsubscribe, publish
from .constants import SYMBOLS, STYLE

__all__ = [
    "subscribe",
    "unsubscribe",
    "publish",
    "SYMBOLS",
    "STYLE",
]
