"""Exception types raised at the value/exception boundary."""

from __future__ import annotations

from typing import Any

__all__ = [
    'FallibleError',
    'MissingValueError',
    'Raised',
    'UnreachableError',
    'to_exception',
    'to_payload',
]


class FallibleError(Exception):
    """Base class for exceptions raised by fallible itself."""


class Raised(FallibleError):  # noqa: N818
    """Carries a non-exception error payload across a raise.

    Python can only raise exceptions, so ``unwrap(failure('boom'))`` and
    ``raise_('boom')`` raise ``Raised('boom')``. The adapters that capture
    exceptions (``from_try``, ``attempt``, ...) unpack it again, so the payload
    round-trips with its identity intact.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Raised({error!r})')

    def __reduce__(self) -> tuple[Any, ...]:
        # args holds the message, so rebuild from the payload instead.
        return type(self), (self.error,)


class MissingValueError(FallibleError, ValueError):
    """A required value was None or unset."""


class UnreachableError(FallibleError, AssertionError):
    """A supposedly exhaustive branch received a value it does not handle."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'Unhandled value: {value!r}')

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.value,)


def to_exception(error: Any) -> BaseException:
    """Return something raisable for an error payload.

    Exception instances are returned unchanged; anything else is wrapped in
    :class:`Raised`.
    """
    if isinstance(error, BaseException):
        return error
    return Raised(error)


def to_payload(exc: BaseException) -> Any:
    """Inverse of :func:`to_exception` for a captured exception."""
    if isinstance(exc, Raised):
        return exc.error
    return exc
