"""Raising helpers for the boundary between values and exceptions.

Provides the few places where fallible deliberately raises:
- raise_: raise as an expression
- must / strict_must: narrow an optional value or fail fast
- assert_: assertion that always runs, even with python -O
- assert_never: the unreachable arm of an exhaustive match
- assert_result: the Result-returning counterpart of assert_
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, overload

import msgspec

from fallible.errors import MissingValueError, UnreachableError, to_exception
from fallible.result import Failure, Result, Success

__all__ = [
    'UNSET',
    'assert_',
    'assert_never',
    'assert_result',
    'must',
    'raise_',
    'strict_must',
]

UNSET = msgspec.UNSET
"""Sentinel for a value that was never provided, as opposed to None."""


def raise_(error: Any = None) -> NoReturn:
    """Raise ``error``; usable where an expression is expected.

    Exception instances and classes are raised as is. Any other value is
    raised inside :class:`~fallible.errors.Raised`.

    Example:
        ```python
        port = int(os.environ.get('PORT') or raise_(KeyError('PORT')))
        ```
    """
    if isinstance(error, type) and issubclass(error, BaseException):
        raise error
    raise to_exception(error)


def must[T](value: T | None, message: str = 'Value is None or unset') -> T:
    """Return ``value``, or raise if it is None or UNSET.

    Falsy values such as 0, '' and False are returned unchanged.

    Raises:
        MissingValueError: If value is None or UNSET.
    """
    if value is None or value is UNSET:
        raise MissingValueError(message)
    return value


def strict_must[T](value: T, message: str = 'Value is unset') -> T:
    """Return ``value``, or raise if it is UNSET. None passes through.

    Raises:
        MissingValueError: If value is UNSET.
    """
    if value is UNSET:
        raise MissingValueError(message)
    return value


def assert_(condition: object, message: str = 'Assertion failed') -> None:
    """Raise AssertionError unless ``condition`` is truthy.

    A function call rather than an ``assert`` statement, so ``python -O``
    does not strip it.

    Args:
        condition: Any object; its truthiness decides.
        message: Message of the AssertionError.

    Raises:
        AssertionError: If condition is falsy.

    Example:
        ```python
        assert_(1 + 1 == 2)  # passes
        assert_([], 'empty batch')  # raises AssertionError('empty batch')
        ```
    """
    if not condition:
        raise AssertionError(message)


def assert_never(value: NoReturn) -> NoReturn:
    """Mark a branch as unreachable.

    Type checkers flag any call they can reach with a real value; at runtime
    it always raises.

    Raises:
        UnreachableError: Always, with message ``Unhandled value: {value!r}``.

    Example:
        ```python
        def label(state: AsyncResult[int, str]) -> str:
            match state:
                case Pending():
                    return 'loading'
                case Success(value):
                    return str(value)
                case Failure(error):
                    return error
                case _:
                    assert_never(state)
        ```
    """
    raise UnreachableError(value)


@overload
def assert_result[E](condition: object, error: E) -> Result[None, E]: ...


@overload
def assert_result[E](condition: object, error: Callable[[], E], *, lazy: bool = True) -> Result[None, E]: ...


def assert_result[E](
    condition: object,
    error: E | Callable[[], E],
    *,
    lazy: bool = False,
) -> Result[None, E]:
    """Return Success(None) if condition is truthy, else Failure(error).

    Validation steps written this way stop at the first unmet condition
    when combined with ``chain`` or ``all_``.

    Args:
        condition: Any object; its truthiness decides.
        error: The Failure payload, or with ``lazy=True`` a factory for it.
        lazy: Build the payload only when the condition fails.

    Returns:
        Success(None) if the condition holds, Failure(error) otherwise.

    Example:
        ```python
        assert_result(True, 'error')
        # Success(value=None)

        assert_result(False, 'validation failed')
        # Failure(error='validation failed')

        all_([
            assert_result(len(name) > 0, 'name required'),
            assert_result(age >= 0, 'age must be non-negative'),
        ])
        ```
    """
    if condition:
        return Success(None)

    return Failure(error() if lazy and callable(error) else error)
