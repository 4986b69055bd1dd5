"""AsyncResult: Pending | Success[V] | Failure[E].

AsyncResult models the state of an in-flight operation, typically the
loading state of a view: ``pending`` until the work completes, then the
Result. This module does not track transitions; the caller replaces one
value with the next as the operation progresses.

Example:
    ```python
    state: AsyncResult[User, str] = pending

    async def refresh(user_id: int) -> None:
        global state
        state = pending
        state = await from_awaitable(api.get_user(user_id))

    async def render() -> str:
        return await match_async(
            state,
            pending=lambda: 'loading...',
            success=lambda user: f'hello {user.name}',
            failure=lambda error: f'error: {error}',
        )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeIs

import msgspec

from fallible.result import Failure, Result, Success

__all__ = [
    'AsyncResult',
    'Pending',
    'is_async_result',
    'is_pending',
    'is_result',
    'match_async',
    'pending',
]


class Pending(msgspec.Struct, frozen=True, gc=False, tag_field='status', tag='pending'):
    """Marker for an operation that has not completed yet.

    This is a singleton - use the ``pending`` constant instead of
    instantiating directly.
    """

    def __repr__(self) -> str:
        return 'pending'


pending: Pending = Pending()
"""Singleton instance representing an in-flight operation."""

type AsyncResult[V, E = Exception] = Pending | Success[V] | Failure[E]
"""Pending, or the Result of a completed operation."""


def is_pending(value: Any) -> TypeIs[Pending]:
    """Return True if ``value`` is the Pending marker.

    Safe on arbitrary input, including None, dicts and functions.
    """
    return isinstance(value, Pending)


def is_result(value: Any) -> TypeIs[Result[Any, Any]]:
    """Return True if ``value`` is a Success or a Failure (not Pending).

    Safe on arbitrary input. Look-alikes such as ``{'value': 1}`` are rejected.
    """
    return isinstance(value, Success | Failure)


def is_async_result(value: Any) -> TypeIs[AsyncResult[Any, Any]]:
    """Return True if ``value`` is Pending, a Success or a Failure."""
    return is_pending(value) or is_result(value)


async def _settle[T](outcome: Awaitable[T] | T) -> T:
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


async def match_async[V, E, T](
    result: AsyncResult[V, E],
    *,
    pending: Callable[[], Awaitable[T] | T],
    success: Callable[[V], Awaitable[T] | T],
    failure: Callable[[E], Awaitable[T] | T],
) -> T:
    """Dispatch on an AsyncResult, calling exactly one handler.

    Handlers may be plain functions or coroutine functions; the value they
    return is awaited when it is awaitable. The call is always a coroutine,
    whichever branch is taken.

    Args:
        result: The AsyncResult to dispatch on.
        pending: Called with no argument for Pending.
        success: Called with the value for Success.
        failure: Called with the error for Failure.

    Returns:
        What the chosen handler returned (awaited if needed).

    Example:
        ```python
        async def example():
            label = await match_async(
                pending,
                pending=lambda: 'p',
                success=lambda value: 's',
                failure=lambda error: 'f',
            )
            assert label == 'p'
        ```
    """
    if isinstance(result, Pending):
        return await _settle(pending())
    return await _settle(result.match(success=success, failure=failure))
