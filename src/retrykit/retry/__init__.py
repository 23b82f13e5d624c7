"""
retrykit - Retry Logic.

Policy, error classification, delay strategies and the retry controller.
"""

from .backoff import constant_delay, constant_one_second_delay, exponential_delay
from .classify import ANY_ERROR, Classifier, ClassifierKind, any_error, matches_any
from .config import (
    MAX_RETRY_FIVE_TIMES,
    MAX_RETRY_FOREVER,
    MAX_RETRY_TEN_TIMES,
    MAX_RETRY_THREE_TIMES,
    RetryConfig,
)
from .controller import Retry, RetryInfo, with_retry

__all__ = [
    "RetryConfig",
    "MAX_RETRY_FOREVER",
    "MAX_RETRY_THREE_TIMES",
    "MAX_RETRY_FIVE_TIMES",
    "MAX_RETRY_TEN_TIMES",
    "Classifier",
    "ClassifierKind",
    "ANY_ERROR",
    "any_error",
    "matches_any",
    "constant_delay",
    "constant_one_second_delay",
    "exponential_delay",
    "Retry",
    "RetryInfo",
    "with_retry",
]
