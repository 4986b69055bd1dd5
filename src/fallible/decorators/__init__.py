"""Decorators and helpers turning raised exceptions into values."""

from fallible.decorators.safe import attempt, safe, safe_async, safely

__all__ = [
    'attempt',
    'safe',
    'safe_async',
    'safely',
]
