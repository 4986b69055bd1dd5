"""JSON encoding and decoding of Result and AsyncResult values.

Every variant carries a ``status`` tag, so a stored or transmitted value
decodes back to the same variant:

    >>> from fallible.codec import encode, decode
    >>> from fallible import success
    >>> encode(success(1))
    b'{"status":"success","value":1}'
    >>> decode(b'{"status":"pending"}')
    pending

Thread Safety:
    - Encoders are NOT thread-safe, so each thread gets its own
    - Decoders are reentrant and shared, one per (value_type, error_type)
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import Any

import msgspec

from fallible.async_.result import AsyncResult, Pending, pending
from fallible.result import Failure, Success

__all__ = ['decode', 'encode']

_local = threading.local()


def _encoder(enc_hook: Callable[[Any], Any] | None) -> msgspec.json.Encoder:
    if enc_hook is not None:
        return msgspec.json.Encoder(enc_hook=enc_hook)
    encoder = getattr(_local, 'encoder', None)
    if encoder is None:
        encoder = msgspec.json.Encoder()
        _local.encoder = encoder
    return encoder


@functools.lru_cache(maxsize=128)
def _decoder(value_type: Any, error_type: Any) -> msgspec.json.Decoder[Any]:
    return msgspec.json.Decoder(Success[value_type] | Failure[error_type] | Pending)


def encode(result: AsyncResult[Any, Any], *, enc_hook: Callable[[Any], Any] | None = None) -> bytes:
    """Encode a Success, Failure or Pending to JSON bytes.

    Args:
        result: The value to encode.
        enc_hook: Converts payloads msgspec cannot encode natively, such as
            exception instances held by a Failure.

    Returns:
        JSON bytes with a ``status`` field naming the variant.

    Raises:
        TypeError: If a payload is not encodable and no enc_hook handles it.
    """
    return _encoder(enc_hook).encode(result)


def decode(
    data: bytes | bytearray | memoryview | str,
    value_type: Any = Any,
    error_type: Any = Any,
) -> AsyncResult[Any, Any]:
    """Decode JSON produced by :func:`encode`.

    Args:
        data: The JSON document.
        value_type: Type the success payload is validated against.
        error_type: Type the failure payload is validated against.

    Returns:
        The decoded Success or Failure, or the shared ``pending`` instance.

    Raises:
        msgspec.ValidationError: If the tag is unknown or a payload has the
            wrong type.
        msgspec.DecodeError: If data is not valid JSON.

    Example:
        >>> decode(b'{"status":"failure","error":"boom"}', int, str)
        Failure(error='boom')
    """
    decoded = _decoder(value_type, error_type).decode(data)
    return pending if isinstance(decoded, Pending) else decoded
