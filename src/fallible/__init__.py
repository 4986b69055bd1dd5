"""fallible: errors as values for Python.

Result (Success | Failure), Maybe, the AsyncResult tri-state, Outcome tuple
interop and a handful of raising helpers for the boundary with exceptions.

Flat imports (preferred):
    from fallible import Success, Failure, Result, success, failure
    from fallible import from_try, safe, must, pending

Submodule imports (for organization):
    from fallible.result import Success, Failure, Result
    from fallible.maybe import Maybe, some, none
    from fallible.async_ import AsyncResult, match_async
    from fallible.codec import encode, decode
"""

# Configuration
from fallible._config import Config, get_config, init
from fallible._logging import configure_logging, get_logger

# Assertions
from fallible.assertions import (
    UNSET,
    assert_,
    assert_never,
    assert_result,
    must,
    raise_,
    strict_must,
)

# Async
from fallible.async_ import (
    AsyncResult,
    Pending,
    is_async_result,
    is_pending,
    is_result,
    match_async,
    pending,
)

# Decorators
from fallible.decorators import attempt, safe, safe_async, safely

# Errors
from fallible.errors import FallibleError, MissingValueError, Raised, UnreachableError

# Interop
from fallible.interop import (
    from_awaitable,
    from_node_callback,
    from_nullable,
    from_promise,
    from_try,
    from_try_async,
)
from fallible.maybe import Maybe, Nothing, Some, is_none, is_some, none, some
from fallible.outcome import Outcome, from_outcome, lift_outcome, to_outcome
from fallible.result import (
    Failure,
    Result,
    Success,
    all_,
    any_,
    chain,
    failure,
    flat_map,
    is_failure,
    is_success,
    map_,
    match,
    recover,
    success,
    unwrap,
    unwrap_or,
    unwrap_or_else,
    unwrap_or_none,
)

__all__ = [
    # Async
    'AsyncResult',
    # Configuration
    'Config',
    # Result types
    'Failure',
    # Errors
    'FallibleError',
    # Maybe
    'Maybe',
    'MissingValueError',
    'Nothing',
    # Outcome
    'Outcome',
    'Pending',
    'Raised',
    'Result',
    'Some',
    'Success',
    # Assertions
    'UNSET',
    'UnreachableError',
    # Result functions
    'all_',
    'any_',
    'assert_',
    'assert_never',
    'assert_result',
    # Decorators
    'attempt',
    'chain',
    # Logging
    'configure_logging',
    'failure',
    'flat_map',
    # Interop
    'from_awaitable',
    'from_node_callback',
    'from_nullable',
    'from_outcome',
    'from_promise',
    'from_try',
    'from_try_async',
    'get_config',
    'get_logger',
    'init',
    'is_async_result',
    'is_failure',
    'is_none',
    'is_pending',
    'is_result',
    'is_some',
    'is_success',
    'lift_outcome',
    'map_',
    'match',
    'match_async',
    'must',
    'none',
    'pending',
    'raise_',
    'recover',
    'safe',
    'safe_async',
    'safely',
    'some',
    'strict_must',
    'success',
    'to_outcome',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
    'unwrap_or_none',
]

__version__ = '0.1.0'
