"""Async utilities: the AsyncResult tri-state and its matcher.

This module provides:
- AsyncResult: Pending | Success | Failure, for in-flight operations
- pending: the shared Pending marker
- is_pending / is_result / is_async_result: total predicates
- match_async: dispatch with sync or async handlers

Examples:
    >>> from fallible.async_ import match_async, pending
    >>>
    >>> async def main():
    ...     return await match_async(
    ...         pending,
    ...         pending=lambda: 'loading',
    ...         success=str,
    ...         failure=repr,
    ...     )
"""

from fallible.async_.result import (
    AsyncResult,
    Pending,
    is_async_result,
    is_pending,
    is_result,
    match_async,
    pending,
)

__all__ = [
    'AsyncResult',
    'Pending',
    'is_async_result',
    'is_pending',
    'is_result',
    'match_async',
    'pending',
]
