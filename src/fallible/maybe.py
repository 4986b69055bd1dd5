"""Maybe type: Some[T] | Nothing, as a specialization of Result.

``Some`` is ``Success`` and ``Nothing`` is ``Failure``; an absent value is the
Failure whose error is None. Every Result combinator (map_, chain, unwrap_or,
...) works on Maybe values as is, and so do ``isinstance`` checks and
``case Some(v)`` / ``case Nothing()`` patterns.

Example:
    ```python
    from fallible import map_, none, some, unwrap_or

    unwrap_or(map_(some(20), lambda x: x + 1), 0)  # 21
    unwrap_or(map_(none, lambda x: x + 1), 0)  # 0
    ```
"""

from __future__ import annotations

from typing import TypeIs

from fallible.result import Failure, Success, is_failure, is_success

__all__ = [
    'Maybe',
    'Nothing',
    'Some',
    'is_none',
    'is_some',
    'none',
    'some',
]

Some = Success
"""A present value. The same class as Success."""

Nothing = Failure
"""The class of absent values. ``none`` is its instance holding None."""

type Maybe[T] = Success[T] | Failure[None]

none: Failure[None] = Failure(None)
"""Shared absent value. Immutable, so one instance serves every caller."""


def some[T](value: T) -> Success[T]:
    """Wrap a present value.

    None itself is a legitimate value here; use ``from_nullable`` to treat
    None as absent.
    """
    return Success(value)


def is_some[T](maybe: Maybe[T]) -> TypeIs[Success[T]]:
    """Return True if the Maybe holds a value."""
    return is_success(maybe)


def is_none[T](maybe: Maybe[T]) -> TypeIs[Failure[None]]:
    """Return True if the Maybe is Nothing."""
    return is_failure(maybe)
