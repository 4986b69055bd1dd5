"""Pytest configuration and shared fixtures for fallible tests."""

import logging

import pytest

from fallible._config import reset
from fallible._logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_defaults():
    """Give every test the default configuration and an untouched logger."""
    reset()
    yield
    reset()
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from fallible import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from fallible import Failure

    return Failure(ValueError('test error'))


@pytest.fixture
def calls():
    """A list recording every argument passed to the ``spy`` returned with it."""
    recorded = []

    def spy(value=None):
        recorded.append(value)
        return value

    return recorded, spy
