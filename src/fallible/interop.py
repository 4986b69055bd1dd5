"""Adapters lifting exception-, awaitable- and callback-based code into Result.

Every adapter converts the configured exception classes (``Exception`` by
default, see :func:`fallible.init`) into a Failure and lets anything else,
such as task cancellation or KeyboardInterrupt, propagate. The async
adapters never raise for a captured exception: their coroutine always
returns a Result.

Example:
    ```python
    import json

    from fallible import from_awaitable, from_node_callback, from_try

    from_try(lambda: json.loads('{"a": 1}'))  # Success(value={'a': 1})
    from_try(lambda: json.loads('{'))  # Failure(error=JSONDecodeError(...))

    async def main():
        page = await from_awaitable(client.get('/status'))
        data = await from_node_callback(lambda cb: legacy.read('config', cb))
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import aiologic

from fallible._config import get_config
from fallible._logging import get_logger
from fallible.errors import Raised, to_payload
from fallible.outcome import NodeCallback, lift_outcome
from fallible.result import Failure, Result, Success

__all__ = [
    'from_awaitable',
    'from_node_callback',
    'from_nullable',
    'from_promise',
    'from_try',
    'from_try_async',
]

logger = get_logger(__name__)


def _catchable() -> tuple[type[BaseException], ...]:
    # Raised is always captured: it only ever carries a Failure's payload.
    return (*get_config().catch, Raised)


def _captured(adapter: str, exc: BaseException) -> Failure[Any]:
    logger.debug('exception_captured', adapter=adapter, error_type=type(exc).__name__)
    return Failure(to_payload(exc))


def from_try[V](fn: Callable[[], V]) -> Result[V, Any]:
    """Call ``fn`` and capture what it raises as a Failure.

    An awaitable returned by ``fn`` is NOT awaited: it becomes the Success
    value as is. Use :func:`from_try_async` to await it.

    Args:
        fn: Zero-argument callable.

    Returns:
        Success(fn()) or Failure(exception).
    """
    try:
        return Success(fn())
    except _catchable() as exc:
        return _captured('from_try', exc)


async def from_try_async[V](fn: Callable[[], Awaitable[V] | V]) -> Result[V, Any]:
    """Call ``fn``, await its result if needed, and capture failures.

    Works with coroutine functions and plain functions alike; an exception
    raised before the first await and one raised while awaiting both become
    a Failure.
    """
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
        return Success(value)
    except _catchable() as exc:
        return _captured('from_try_async', exc)


async def from_awaitable[V](awaitable: Awaitable[V]) -> Result[V, Any]:
    """Await ``awaitable``: its value becomes a Success, its exception a Failure.

    Example:
        ```python
        result = await from_awaitable(asyncio.wait_for(fetch(), 5))
        # Failure(error=TimeoutError()) when fetch is too slow
        ```
    """
    try:
        return Success(await awaitable)
    except _catchable() as exc:
        return _captured('from_awaitable', exc)


from_promise = from_awaitable


def from_nullable[V, E](value: V | None, error: E = None) -> Result[V, E]:  # type: ignore[assignment]
    """Wrap a value that may be None.

    Only None counts as absent: 0, '' and False are present values.

    Examples:
        >>> from_nullable(0, 'missing')
        Success(value=0)
        >>> from_nullable(None, 'missing')
        Failure(error='missing')
    """
    if value is not None:
        return Success(value)
    return Failure(error)


async def from_node_callback[V, E](fn: Callable[[NodeCallback[V, E]], Any]) -> Result[V, E]:
    """Bridge an error-first callback API into an awaitable Result.

    ``fn`` receives a callback to call as ``cb(error)`` or ``cb(None, value)``.
    The first call settles the Result; later calls are ignored. The callback
    may be called synchronously inside ``fn``, later from the event loop, or
    from another thread. If ``fn`` raises before calling it, the exception
    becomes a Failure.

    There is no timeout: if the callback is never called, neither does this
    coroutine return. Wrap it in ``asyncio.timeout`` or an anyio cancel scope
    when that matters. Runs on any event loop aiologic supports (asyncio,
    trio, anyio backends).

    Args:
        fn: Function that starts the operation and hands the callback on.

    Returns:
        Failure(error) if the callback got an error, else Success(value).

    Example:
        ```python
        def read_config(path, callback): ...  # third-party, error-first

        result = await from_node_callback(lambda cb: read_config('app.toml', cb))
        ```
    """
    settled = aiologic.Event()
    # Every call appends; the first append is the outcome.
    outcomes: list[Result[V, E]] = []

    def resolve(result: Result[V, E]) -> None:
        outcomes.append(result)
        settled.set()

    try:
        fn(lift_outcome(resolve))
    except _catchable() as exc:
        resolve(_captured('from_node_callback', exc))

    await settled
    return outcomes[0]
