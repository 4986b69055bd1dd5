"""Process-wide configuration: Config, init, get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV = 'FALLIBLE_LOG_LEVEL'


@dataclass(frozen=True)
class Config:
    """Configuration for fallible.

    Attributes:
        log_level: Logging level for the ``fallible`` logger (e.g. "DEBUG").
            None leaves logging to the application.
        catch: Exception classes the adapters (from_try, from_awaitable,
            safely, ...) turn into a Failure. Anything else propagates.
    """

    log_level: str | None = None
    catch: tuple[type[BaseException], ...] = (Exception,)


_DEFAULT = Config()

# Global configuration (set by init())
_config: Config = _DEFAULT


def _detect_log_level() -> str | None:
    """Read the log level from FALLIBLE_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if not env_level:
        return None
    if env_level not in logging.getLevelNamesMapping():
        logging.getLogger(__name__).warning("Unknown %s value '%s', ignoring", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def _validate_catch(catch: tuple[type[BaseException], ...]) -> tuple[type[BaseException], ...]:
    catch = tuple(catch)
    if not catch:
        msg = 'catch must name at least one exception class'
        raise ValueError(msg)
    for exc_type in catch:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'catch entries must be exception classes, got {exc_type!r}'
            raise ValueError(msg)
    return catch


def init(
    log_level: str | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Set the process-wide configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to the
            FALLIBLE_LOG_LEVEL environment variable; None = leave logging alone.
        catch: Exception classes converted into a Failure by the adapters.
            Defaults to ``(Exception,)``.

    Returns:
        The Config that was set.

    Raises:
        ValueError: If catch is empty or holds something that is not an
            exception class.

    Example:
        ```python
        import fallible

        # Debug logging of every captured exception
        fallible.init(log_level='DEBUG')

        # Only capture domain errors; anything else propagates
        fallible.init(catch=(LookupError, ValueError))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_catch = _validate_catch(catch) if catch is not None else _DEFAULT.catch

    _config = Config(log_level=resolved_level, catch=resolved_catch)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> Config:
    """Get the current configuration (defaults until init() is called)."""
    return _config


def reset() -> None:
    """Restore the default configuration."""
    global _config  # noqa: PLW0603
    _config = _DEFAULT
