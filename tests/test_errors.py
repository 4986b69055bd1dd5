"""Tests for the exception taxonomy."""

import copy
import pickle

import pytest

from fallible import FallibleError, Raised, UnreachableError, failure, from_try, unwrap
from fallible.errors import to_exception, to_payload


class TestRaised:
    """Tests for the Raised envelope."""

    def test_pickle_keeps_payload(self):
        """A pickled Raised comes back with its payload and message."""
        restored = pickle.loads(pickle.dumps(Raised({'code': 404})))
        assert restored.error == {'code': 404}
        assert str(restored) == "Raised({'code': 404})"

    def test_pickle_from_unwrap(self):
        """A Raised caught from unwrap survives pickling and unwraps again."""
        with pytest.raises(Raised) as info:
            unwrap(failure('boom'))
        restored = pickle.loads(pickle.dumps(info.value))
        assert to_payload(restored) == 'boom'

        def reraise():
            raise restored

        assert from_try(reraise) == failure('boom')

    def test_deepcopy(self):
        """deepcopy goes through the same reduction."""
        payload = ['a', 'b']
        clone = copy.deepcopy(Raised(payload))
        assert clone.error == payload
        assert clone.error is not payload

    def test_is_fallible_error(self):
        """Raised is part of the library's error hierarchy."""
        assert isinstance(Raised(1), FallibleError)


class TestUnreachableError:
    """Tests for UnreachableError."""

    def test_pickle_keeps_value(self):
        """A pickled UnreachableError keeps the value and its message."""
        restored = pickle.loads(pickle.dumps(UnreachableError('surprise')))
        assert restored.value == 'surprise'
        assert str(restored) == "Unhandled value: 'surprise'"


class TestConversions:
    """Tests for to_exception and to_payload."""

    def test_exception_passes_through(self):
        """An exception instance is already raisable."""
        error = OSError('gone')
        assert to_exception(error) is error
        assert to_payload(error) is error

    def test_payload_round_trip_keeps_identity(self):
        """A non-exception payload goes in and out of Raised unchanged."""
        payload = object()
        assert to_payload(to_exception(payload)) is payload
