"""Catching exceptions into values: @safe, @safe_async, safely and attempt."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fallible._config import get_config
from fallible.errors import Raised, to_payload
from fallible.interop import from_awaitable, from_try
from fallible.result import Failure, Result, Success

__all__ = ['attempt', 'safe', 'safe_async', 'safely']

type Catch = tuple[type[BaseException], ...]


def _catch_set(exceptions: Catch | None) -> Catch:
    # Read at call time so init() applies to functions decorated earlier.
    return (*(get_config().catch if exceptions is None else exceptions), Raised)


def _capturing(exceptions: Catch | None) -> Any:
    @wrapt.decorator
    def capture(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        try:
            value = wrapped(*args, **kwargs)
        except _catch_set(exceptions) as exc:
            return Failure(to_payload(exc))
        return Success(value)

    return capture


def _capturing_async(exceptions: Catch | None) -> Any:
    @wrapt.decorator
    async def capture(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            value = await wrapped(*args, **kwargs)
        except _catch_set(exceptions) as exc:
            return Failure(to_payload(exc))
        return Success(value)

    return capture


@overload
def safe[**P, R](func: Callable[P, R], /) -> Callable[P, Result[R, Exception]]: ...


@overload
def safe[**P, R, X: BaseException](
    func: None = None, /, *, exceptions: tuple[type[X], ...] | None = None
) -> Callable[[Callable[P, R]], Callable[P, Result[R, X]]]: ...


def safe(func: Callable[..., Any] | None = None, /, *, exceptions: Catch | None = None) -> Any:
    """Make a function return a Result instead of raising.

    ``@safe`` catches the configured exception classes (``Exception`` unless
    :func:`fallible.init` says otherwise); ``@safe(exceptions=(...))`` catches
    only the listed ones and lets the rest propagate. Name, docstring and
    signature of the function are kept, and methods bind as usual.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def port(text: str) -> int:
            return int(text)

        port('8080')  # Success(value=8080)
        port('http')  # Failure(error=ValueError(...))
        ```
    """
    decorator = _capturing(exceptions)
    return decorator if func is None else decorator(func)


@overload
def safe_async[**P, R](func: Callable[P, Awaitable[R]], /) -> Callable[P, Awaitable[Result[R, Exception]]]: ...


@overload
def safe_async[**P, R, X: BaseException](
    func: None = None, /, *, exceptions: tuple[type[X], ...] | None = None
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[Result[R, X]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, /, *, exceptions: Catch | None = None) -> Any:
    """Coroutine-function counterpart of :func:`safe`.

    The decorated function is still a coroutine function; awaiting it gives
    a Result. Cancellation is not captured unless a BaseException class is
    listed in ``exceptions``.
    """
    decorator = _capturing_async(exceptions)
    return decorator if func is None else decorator(func)


async def _awaited_or[T](awaitable: Awaitable[T], default: T) -> T:
    return (await from_awaitable(awaitable)).unwrap_or(default)


@overload
def safely[T](x: Callable[[], Awaitable[T]], default: T) -> Awaitable[T]: ...


@overload
def safely[T](x: Callable[[], T], default: T) -> T: ...


@overload
def safely[T](x: Awaitable[T], default: T) -> Awaitable[T]: ...


def safely(x: Any, default: Any) -> Any:
    """Evaluate ``x``, falling back to ``default`` instead of raising.

    ``x`` may be:
    - a callable: it is called, and ``default`` replaces any exception;
    - a callable returning an awaitable, or an awaitable: a coroutine is
      returned, resolving to the value or to ``default`` on exception;
    - any other value: returned unchanged.

    Example:
        ```python
        safely(lambda: int('42'), 0)  # 42
        safely(lambda: int('x'), 0)  # 0
        await safely(fetch_quota(), 0)  # quota, or 0 if fetch_quota() raised
        ```
    """
    if callable(x):
        result = from_try(x)
        if isinstance(result, Failure):
            return default
        if inspect.isawaitable(result.value):
            return _awaited_or(result.value, default)
        return result.value
    if inspect.isawaitable(x):
        return _awaited_or(x, default)
    return x


@overload
def attempt[T](x: Callable[[], Awaitable[T]]) -> Awaitable[Result[T, Any]]: ...


@overload
def attempt[T](x: Callable[[], T]) -> Result[T, Any]: ...


@overload
def attempt[T](x: Awaitable[T]) -> Awaitable[Result[T, Any]]: ...


def attempt(x: Any) -> Any:
    """Like :func:`safely`, but keep the error: return a Result.

    Same input shapes as safely; awaitable inputs give a coroutine of a Result.
    A plain value is wrapped in Success.

    Example:
        ```python
        attempt(lambda: int('x'))
        # Failure(error=ValueError("invalid literal for int() with base 10: 'x'"))
        ```
    """
    if callable(x):
        result = from_try(x)
        if isinstance(result, Success) and inspect.isawaitable(result.value):
            return from_awaitable(result.value)
        return result
    if inspect.isawaitable(x):
        return from_awaitable(x)
    return Success(x)
