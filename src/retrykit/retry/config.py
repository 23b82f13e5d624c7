"""
Retry configuration and policy validation.
"""

from dataclasses import dataclass, field
from typing import Sequence

from .backoff import DelayFunc, constant_one_second_delay, exponential_delay
from .classify import Classifier, any_error, is_classifiable
from ..exceptions import InvalidConfigError

MAX_RETRY_FOREVER = 99_999_999
MAX_RETRY_THREE_TIMES = 3
MAX_RETRY_FIVE_TIMES = 5
MAX_RETRY_TEN_TIMES = 10

ClassifierLike = Classifier | type[BaseException] | BaseException


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_attempts: Maximum number of calls to the operation
            (default: MAX_RETRY_FOREVER)
        delay_func: Maps the zero-based attempt index to a delay in seconds
            (default: one second constant)
        retryable_errors: Classifiers for errors that trigger a retry;
            use any_error() to retry on everything (default: any error)
        raise_on_exhaustion: Raise AttemptsExhaustedError when every attempt
            failed instead of stopping silently (default: False)
    """

    max_attempts: int = MAX_RETRY_FOREVER
    delay_func: DelayFunc | None = constant_one_second_delay
    retryable_errors: Sequence[ClassifierLike] | None = field(
        default_factory=lambda: tuple(any_error())
    )
    raise_on_exhaustion: bool = False

    def __post_init__(self) -> None:
        # Keep classifiers immutable so the frozen config stays hashable.
        if isinstance(self.retryable_errors, (list, tuple)):
            object.__setattr__(self, "retryable_errors", tuple(self.retryable_errors))

    def validate(self) -> None:
        """
        Check every field before the config is handed to a controller.

        Raises:
            InvalidConfigError: If any field is missing or out of range
        """
        if self.retryable_errors is None:
            raise InvalidConfigError(
                "use any_error() instead of None", field="retryable_errors"
            )
        if len(self.retryable_errors) == 0:
            raise InvalidConfigError(
                "retryable_errors must not be empty", field="retryable_errors"
            )
        for entry in self.retryable_errors:
            if not is_classifiable(entry):
                raise InvalidConfigError(
                    f"{entry!r} is not a classifier, exception class or exception",
                    field="retryable_errors",
                )

        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidConfigError(
                f"max_attempts must be an int, got {type(self.max_attempts).__name__}",
                field="max_attempts",
            )
        if self.max_attempts <= 0:
            raise InvalidConfigError("max_attempts must be > 0", field="max_attempts")

        if self.delay_func is None or not callable(self.delay_func):
            raise InvalidConfigError("delay_func must be callable", field="delay_func")

    @property
    def classifiers(self) -> tuple[Classifier, ...]:
        """retryable_errors coerced to Classifier objects."""
        return tuple(Classifier.of(entry) for entry in self.retryable_errors or ())

    def is_last_attempt(self, attempt: int) -> bool:
        """True when no further call follows the given zero-based attempt."""
        return attempt >= self.max_attempts - 1

    @classmethod
    def default(cls) -> "RetryConfig":
        """Retry forever on any error, one second apart."""
        return cls()

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (three attempts, one second apart)."""
        return cls(max_attempts=MAX_RETRY_THREE_TIMES)

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (ten attempts, exponential delay)."""
        return cls(
            max_attempts=MAX_RETRY_TEN_TIMES,
            delay_func=exponential_delay,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset that calls the operation once."""
        return cls(max_attempts=1)
