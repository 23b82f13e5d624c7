"""
Retry controller and decorator.
"""

import functools
import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar, ParamSpec

from .classify import matches_any
from .config import MAX_RETRY_FOREVER, RetryConfig
from ..exceptions import AttemptsExhaustedError, Fault

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


@dataclass(frozen=True)
class RetryInfo:
    """Terminal failure reported to the retry listener."""

    error: BaseException
    retry_count: int


RetryListener = Callable[[RetryInfo], None]


class Retry:
    """
    Calls an operation until it succeeds, fails with a non-retryable error,
    raises a Fault, or runs out of attempts.

    A Retry instance keeps its attempt counter between calls, so use one
    instance per in-flight loop.
    """

    def __init__(self, config: RetryConfig | None = None):
        """
        Initialize the controller.

        Args:
            config: Retry policy (default: RetryConfig.default())

        Raises:
            InvalidConfigError: If the config does not validate
        """
        self._config = RetryConfig.default()
        self._listener: RetryListener | None = None
        self.retry_count = 0
        if config is not None:
            self.set_config(config)

    @property
    def config(self) -> RetryConfig:
        return self._config

    def set_config(self, config: RetryConfig) -> None:
        """
        Replace the retry policy.

        The current policy stays in place if the new one is invalid.

        Raises:
            InvalidConfigError: If the config does not validate
        """
        config.validate()
        self._config = config

    def set_retry_listener(self, listener: RetryListener | None) -> None:
        """Register the callback receiving terminal failures. None clears it."""
        self._listener = listener

    def on_retry(self, operation: Callable[[], T]) -> T | None:
        """
        Run the operation under the current policy.

        Args:
            operation: Zero-argument callable; raising an Exception counts as
                a failed attempt, raising Fault stops the loop

        Returns:
            The operation's return value on success, otherwise None

        Raises:
            AttemptsExhaustedError: Only when config.raise_on_exhaustion is set
                and every attempt failed with a retryable error
        """
        config = self._config
        classifiers = config.classifiers
        last_error: Exception | None = None

        self.retry_count = 0

        while self.retry_count < config.max_attempts:
            try:
                result = operation()
            except Fault as fault:
                logger.error(
                    f"Fault on attempt {self.retry_count + 1}, stopping: {fault}"
                )
                self._notify(fault)
                return None
            except Exception as e:
                if not matches_any(e, classifiers):
                    logger.info(
                        f"Non-retryable error on attempt {self.retry_count + 1}: {e!r}"
                    )
                    self._notify(e)
                    return None

                last_error = e
                if not config.is_last_attempt(self.retry_count):
                    delay = max(0, config.delay_func(self.retry_count))
                    limit = (
                        "forever"
                        if config.max_attempts == MAX_RETRY_FOREVER
                        else config.max_attempts
                    )
                    logger.warning(
                        f"Retry {self.retry_count + 1}/{limit}: {e!r}, "
                        f"waiting {delay:.1f}s"
                    )
                    time.sleep(delay)
            else:
                logger.debug(f"Succeeded on attempt {self.retry_count + 1}")
                return result

            self.retry_count += 1

        # Exhaustion is silent unless strict mode asks for an outcome.
        if config.raise_on_exhaustion:
            raise AttemptsExhaustedError(self.retry_count, last_error) from last_error
        logger.debug(f"Gave up after {self.retry_count} attempts: {last_error!r}")
        return None

    run = on_retry

    def _notify(self, error: BaseException) -> None:
        if self._listener is None:
            return
        self._listener(RetryInfo(error=error, retry_count=self.retry_count))


def with_retry(
    config: RetryConfig | None = None,
    on_error: RetryListener | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T | None]]:
    """
    Decorator running a function under a retry policy.

    Each call gets its own Retry, so the decorated function may be called
    from several threads.

    Args:
        config: Retry configuration (default: RetryConfig.default())
        on_error: Optional listener for terminal failures

    Returns:
        Decorated function returning the wrapped result, or None on failure

    Raises:
        InvalidConfigError: At decoration time if the config does not validate
    """
    if config is None:
        config = RetryConfig.default()
    config.validate()

    def decorator(func: Callable[P, T]) -> Callable[P, T | None]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | None:
            retry = Retry(config)
            retry.set_retry_listener(on_error)
            return retry.on_retry(lambda: func(*args, **kwargs))

        return wrapper

    return decorator
