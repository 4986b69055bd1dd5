"""Assertion utilities: raise_, must, strict_must, assert_, assert_never, assert_result."""

from fallible.assertions.safe import (
    UNSET,
    assert_,
    assert_never,
    assert_result,
    must,
    raise_,
    strict_must,
)

__all__ = [
    'UNSET',
    'assert_',
    'assert_never',
    'assert_result',
    'must',
    'raise_',
    'strict_must',
]
