"""Tests for JSON encoding and decoding of AsyncResult values."""

import json
from concurrent.futures import ThreadPoolExecutor

import msgspec
import pytest
from hypothesis import given

from fallible import Failure, Pending, Success, failure, is_pending, none, pending, success
from fallible.codec import decode, encode
from tests.strategies import json_values


class TestEncode:
    """Tests for encode."""

    def test_success(self):
        """A Success carries the success tag and its value."""
        assert encode(success(1)) == b'{"status":"success","value":1}'

    def test_failure(self):
        """A Failure carries the failure tag and its error."""
        assert encode(failure('boom')) == b'{"status":"failure","error":"boom"}'

    def test_pending(self):
        """pending is a bare tag."""
        assert encode(pending) == b'{"status":"pending"}'

    def test_none_payloads_stay_distinguishable(self):
        """success(None) and none encode differently."""
        assert json.loads(encode(success(None))) == {'status': 'success', 'value': None}
        assert json.loads(encode(none)) == {'status': 'failure', 'error': None}

    def test_exception_needs_enc_hook(self):
        """Exceptions are not JSON-native."""
        with pytest.raises(TypeError):
            encode(failure(ValueError('bad')))

    def test_enc_hook(self):
        """enc_hook converts payloads msgspec cannot encode."""
        data = encode(failure(ValueError('bad')), enc_hook=repr)
        assert json.loads(data) == {'status': 'failure', 'error': "ValueError('bad')"}

    def test_thread_local_encoders(self):
        """Encoding from many threads gives the same bytes."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            encoded = list(pool.map(lambda n: encode(success(n)), range(50)))
        assert encoded == [encode(success(n)) for n in range(50)]


class TestDecode:
    """Tests for decode."""

    def test_success(self):
        """A success document decodes to Success."""
        assert decode(b'{"status":"success","value":[1,2]}') == Success([1, 2])

    def test_failure(self):
        """A failure document decodes to Failure."""
        assert decode(b'{"status":"failure","error":"boom"}', int, str) == Failure('boom')

    def test_pending(self):
        """A pending document decodes to Pending."""
        decoded = decode('{"status":"pending"}')
        assert is_pending(decoded)
        assert decoded is pending
        assert isinstance(decoded, Pending)

    def test_typed_payload(self):
        """The value type is validated."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"status":"success","value":"x"}', int)

    def test_typed_error(self):
        """The error type is validated."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"status":"failure","error":1}', int, str)

    def test_unknown_tag(self):
        """An unknown status is rejected."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"status":"done","value":1}')

    def test_missing_tag(self):
        """A look-alike without a status is rejected."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"value":1}')

    def test_invalid_json(self):
        """Malformed JSON raises DecodeError."""
        with pytest.raises(msgspec.DecodeError):
            decode(b'{"status":')

    @given(json_values)
    def test_success_round_trip(self, value):
        """decode(encode(success(v))) == success(v) for JSON values."""
        assert decode(encode(success(value))) == success(value)

    @given(json_values)
    def test_failure_round_trip(self, error):
        """decode(encode(failure(e))) == failure(e) for JSON values."""
        assert decode(encode(failure(error))) == failure(error)
