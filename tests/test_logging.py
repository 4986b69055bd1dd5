"""Tests for fallible's structured logging."""

import json
import logging

from fallible import configure_logging, from_try, get_logger


def boom():
    raise ValueError('boom')


class TestCapturedExceptionEvents:
    """Adapters log each captured exception at debug level."""

    def test_silent_by_default(self, caplog):
        """Nothing is emitted unless the application asks for debug logs."""
        from_try(boom)
        assert not [r for r in caplog.records if r.name.startswith('fallible')]

    def test_debug_event(self, caplog):
        """A captured exception emits an exception_captured event."""
        caplog.set_level(logging.DEBUG, logger='fallible')
        from_try(boom)
        (record,) = [r for r in caplog.records if r.name == 'fallible.interop']
        assert record.levelno == logging.DEBUG
        assert record.msg['event'] == 'exception_captured'
        assert record.msg['adapter'] == 'from_try'
        assert record.msg['error_type'] == 'ValueError'

    def test_success_is_not_logged(self, caplog):
        """Only failures produce events."""
        caplog.set_level(logging.DEBUG, logger='fallible')
        from_try(lambda: 1)
        assert not [r for r in caplog.records if r.name.startswith('fallible')]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys):
        """configure_logging renders JSON lines on stderr."""
        configure_logging('DEBUG')
        from_try(boom)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event['event'] == 'exception_captured'
        assert event['adapter'] == 'from_try'
        assert event['level'] == 'debug'
        assert event['logger'] == 'fallible.interop'
        assert 'timestamp' in event

    def test_level_filters(self, capsys):
        """Events below the configured level are dropped."""
        configure_logging('WARNING')
        from_try(boom)
        assert capsys.readouterr().err == ''

    def test_does_not_propagate(self):
        """fallible's handler keeps events away from the root logger."""
        configure_logging('INFO')
        assert logging.getLogger('fallible').propagate is False

    def test_console_output(self, capsys):
        """json_output=False renders readable console lines."""
        configure_logging('DEBUG', json_output=False)
        from_try(boom)
        assert 'exception_captured' in capsys.readouterr().err


class TestGetLogger:
    """Tests for get_logger."""

    def test_named_logger(self, caplog):
        """get_logger binds to the named stdlib logger."""
        caplog.set_level(logging.INFO, logger='fallible')
        get_logger('fallible.custom').info('hello', key='value')
        (record,) = [r for r in caplog.records if r.name == 'fallible.custom']
        assert record.msg['event'] == 'hello'
        assert record.msg['key'] == 'value'

    def test_default_name(self, caplog):
        """Without a name the fallible logger is used."""
        caplog.set_level(logging.INFO, logger='fallible')
        get_logger().info('root event')
        assert any(r.name == 'fallible' for r in caplog.records)
