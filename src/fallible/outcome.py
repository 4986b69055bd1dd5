"""Outcome: the ``(error, value)`` pair of error-first callbacks.

An Outcome only exists at the boundary with callback-style code and is
converted to or from a Result straight away.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from fallible.result import Failure, Result, Success

__all__ = [
    'FailureOutcome',
    'NodeCallback',
    'Outcome',
    'SuccessOutcome',
    'from_outcome',
    'lift_outcome',
    'to_outcome',
]

type SuccessOutcome[V] = tuple[None, V]
type FailureOutcome[E] = tuple[E, None]
type Outcome[V, E] = SuccessOutcome[V] | FailureOutcome[E]


class NodeCallback[V, E](Protocol):
    """An error-first callback: ``cb(error)`` or ``cb(None, value)``."""

    def __call__(self, error: E | None, value: V | None = None, /) -> None: ...


def from_outcome[V, E](outcome: Outcome[V, E]) -> Result[V, E]:
    """Convert an ``(error, value)`` pair into a Result.

    A non-None error slot gives Failure(error); otherwise the value slot is
    wrapped in Success, even when it is None.

    Examples:
        >>> from_outcome((None, 42))
        Success(value=42)
        >>> from_outcome((KeyError('id'), None))
        Failure(error=KeyError('id'))
    """
    error, value = outcome
    if error is not None:
        return Failure(error)
    return Success(value)


def to_outcome[V, E](result: Result[V, E]) -> Outcome[V, E]:
    """Convert a Result into an ``(error, value)`` pair.

    Inverse of :func:`from_outcome` for well-formed outcomes.
    """
    if isinstance(result, Success):
        return (None, result.value)
    return (result.error, None)


def lift_outcome[V, E](callback: Callable[[Result[V, E]], Any]) -> NodeCallback[V, E]:
    """Turn a Result consumer into an error-first callback.

    Useful when a third party expects ``cb(error, value)`` but the calling
    code wants to handle a Result.

    Args:
        callback: Called with Failure(error) when error is not None, else
            with Success(value).

    Returns:
        An error-first callback.

    Example:
        ```python
        results = []
        cb = lift_outcome(results.append)
        cb(None, 'data')
        cb(OSError('gone'))
        # results == [Success(value='data'), Failure(error=OSError('gone'))]
        ```
    """

    def node_callback(error: E | None, value: V | None = None, /) -> None:
        if error is not None:
            callback(Failure(error))
        else:
            callback(Success(value))

    return node_callback
