"""Result type: Success[V] | Failure[E] for errors as values.

Both variants are frozen msgspec structs carrying an explicit ``status`` tag,
so they are discriminated by class (never by which field is present) and
serialize as a tagged union. ``failure(None)`` is therefore still a Failure.

Every operation exists twice: as a method on the variants and as a
module-level function that delegates to it.

Example:
    ```python
    from fallible import all_, chain, failure, map_, success, unwrap_or

    def parse(text: str) -> Result[int, str]:
        return success(int(text)) if text.isdigit() else failure(f'not a number: {text!r}')

    total = map_(all_(parse(t) for t in ['1', '2', '3']), sum)
    # Success(value=6)

    unwrap_or(chain(parse('x'), lambda n: success(n * 2)), 0)
    # 0
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from fallible.errors import to_exception

__all__ = [
    'Failure',
    'Result',
    'Success',
    'all_',
    'any_',
    'chain',
    'failure',
    'flat_map',
    'is_failure',
    'is_success',
    'map_',
    'match',
    'recover',
    'success',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
    'unwrap_or_none',
]

class Success[V](msgspec.Struct, frozen=True, tag_field='status', tag='success'):
    """Success variant of Result containing a value of type V.

    Examples:
        >>> Success(42).unwrap()
        42
        >>> Success(21).map(lambda x: x * 2)
        Success(value=42)
    """

    value: V

    def is_success(self) -> TypeIs[Success[V]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[Any]]:
        """Return False since this is Success."""
        return False

    def unwrap(self) -> V:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: V) -> V:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_none(self) -> V | None:
        """Return the contained value."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], V]) -> V:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def recover(self, f: Callable[[Any], V]) -> Success[V]:  # noqa: ARG002
        """Return self unchanged since there is nothing to recover from."""
        return self

    def map[U](self, f: Callable[[V], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            A new Success containing ``f(value)``.
        """
        return Success(f(self.value))

    def chain[U, E](self, f: Callable[[V], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flat_map or bind.

        Args:
            f: Function that takes V and returns Result[U, E].

        Returns:
            The Result returned by f, as is.
        """
        return f(self.value)

    flat_map = chain

    def match[T](self, *, success: Callable[[V], T], failure: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Call the success handler with the value and return its result."""
        return success(self.value)


class Failure[E](msgspec.Struct, frozen=True, tag_field='status', tag='failure'):
    """Failure variant of Result containing an error of type E.

    The error is unconstrained: an exception, a string, an enum member or None.

    Examples:
        >>> Failure('boom').unwrap_or(0)
        0
        >>> Failure('boom').map(lambda x: x * 2)
        Failure(error='boom')
    """

    error: E

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            E: The error itself when it is an exception.
            Raised: Wrapping the error when it is any other value.
        """
        raise to_exception(self.error)

    def unwrap_or[V](self, default: V) -> V:
        """Return the default since this is Failure."""
        return default

    def unwrap_or_none(self) -> None:
        """Return None since this is Failure."""
        return None

    def unwrap_or_else[V](self, f: Callable[[E], V]) -> V:
        """Compute a value from the error.

        f is called exactly once, with the contained error.
        """
        return f(self.error)

    def recover[V](self, f: Callable[[E], V]) -> Success[V]:
        """Turn the error into a value, always producing a Success."""
        return Success(f(self.error))

    def map(self, _f: Callable[[Any], Any]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def chain(self, _f: Callable[[Any], Any]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    flat_map = chain

    def match[T](self, *, success: Callable[[Any], T], failure: Callable[[E], T]) -> T:  # noqa: ARG002
        """Call the failure handler with the error and return its result."""
        return failure(self.error)


type Result[V, E = Exception] = Success[V] | Failure[E]
"""Either a Success[V] or a Failure[E]."""


def success[V](value: V) -> Success[V]:
    """Wrap a value in Success."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Wrap an error in Failure. Any value is accepted, None included."""
    return Failure(error)


def is_success[V, E](result: Result[V, E]) -> TypeIs[Success[V]]:
    """Check if a value is a Success.

    Safe on arbitrary input: anything that is not a Success gives False.
    """
    return isinstance(result, Success)


def is_failure[V, E](result: Result[V, E]) -> TypeIs[Failure[E]]:
    """Check if a value is a Failure.

    Safe on arbitrary input: anything that is not a Failure gives False.
    """
    return isinstance(result, Failure)


def unwrap[V, E](result: Result[V, E]) -> V:
    """Return the value of a Success or raise the error of a Failure.

    Args:
        result: The Result to unwrap.

    Returns:
        The contained value.

    Raises:
        E: The contained error if it is an exception.
        Raised: If the contained error is not an exception; ``.error`` holds it.
    """
    return result.unwrap()


def unwrap_or[V, E](result: Result[V, E], default: V) -> V:
    """Return the value of a Success, or ``default``."""
    return result.unwrap_or(default)


def unwrap_or_none[V, E](result: Result[V, E]) -> V | None:
    """Return the value of a Success, or None."""
    return result.unwrap_or_none()


def unwrap_or_else[V, E](result: Result[V, E], f: Callable[[E], V]) -> V:
    """Return the value of a Success, or compute one from the error.

    ``f`` is only called for a Failure.
    """
    return result.unwrap_or_else(f)


def recover[V, E](result: Result[V, E], f: Callable[[E], V]) -> Success[V]:
    """Return a Success unchanged, or a new Success holding ``f(error)``."""
    return result.recover(f)


def map_[V, U, E](result: Result[V, E], f: Callable[[V], U]) -> Result[U, E]:
    """Transform the value of a Success. Named map_ to leave the builtin alone.

    Args:
        result: The Result to transform.
        f: Function to apply to the value if Success.

    Returns:
        A new Success with the transformed value, otherwise the original
        Failure instance (f is not called).
    """
    return result.map(f)


def chain[V, U, E](result: Result[V, E], f: Callable[[V], Result[U, E]]) -> Result[U, E]:
    """Sequence a computation that may fail.

    Args:
        result: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        ``f(value)`` if Success, otherwise the original Failure instance.
    """
    return result.chain(f)


flat_map = chain


def all_[V, E](results: Iterable[Result[V, E]]) -> Result[list[V], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Failure: it is returned as is and the
    iterable is not consumed any further.

    Examples:
        >>> all_([Success(1), Success(2), Success(3)])
        Success(value=[1, 2, 3])
        >>> all_([Success(1), Failure('x'), Success(3)])
        Failure(error='x')
    """
    values: list[V] = []
    for item in results:
        if isinstance(item, Failure):
            return item
        values.append(item.value)
    return Success(values)


def any_[V, E](results: Iterable[Result[V, E]]) -> Result[V, list[E]]:
    """Return the first Success, or a Failure holding every error in order.

    Examples:
        >>> any_([Failure('a'), Success(2), Failure('c')])
        Success(value=2)
        >>> any_([Failure('a'), Failure('b')])
        Failure(error=['a', 'b'])
    """
    errors: list[E] = []
    for item in results:
        if isinstance(item, Success):
            return item
        errors.append(item.error)
    return Failure(errors)


def match[V, E, T](
    result: Result[V, E],
    *,
    success: Callable[[V], T],
    failure: Callable[[E], T],
) -> T:
    """Dispatch on a Result, calling exactly one handler.

    Example:
        ```python
        message = match(
            load_user(42),
            success=lambda user: f'hello {user.name}',
            failure=lambda error: f'cannot load user: {error}',
        )
        ```
    """
    return result.match(success=success, failure=failure)
