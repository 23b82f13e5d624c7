"""
retrykit - Retry a fallible operation under a validated policy.
"""

from .exceptions import (
    RetryError,
    InvalidConfigError,
    Fault,
    AttemptsExhaustedError,
)
from .retry import (
    ANY_ERROR,
    MAX_RETRY_FIVE_TIMES,
    MAX_RETRY_FOREVER,
    MAX_RETRY_TEN_TIMES,
    MAX_RETRY_THREE_TIMES,
    Classifier,
    ClassifierKind,
    Retry,
    RetryConfig,
    RetryInfo,
    any_error,
    constant_delay,
    constant_one_second_delay,
    exponential_delay,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Controller
    "Retry",
    "RetryInfo",
    "with_retry",
    # Config
    "RetryConfig",
    "MAX_RETRY_FOREVER",
    "MAX_RETRY_THREE_TIMES",
    "MAX_RETRY_FIVE_TIMES",
    "MAX_RETRY_TEN_TIMES",
    # Classification
    "Classifier",
    "ClassifierKind",
    "ANY_ERROR",
    "any_error",
    # Delay
    "constant_delay",
    "constant_one_second_delay",
    "exponential_delay",
    # Exceptions
    "RetryError",
    "InvalidConfigError",
    "Fault",
    "AttemptsExhaustedError",
]
