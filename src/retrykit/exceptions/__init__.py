"""
retrykit - Exception Hierarchy.

Errors raised by policy validation, fault signalling and strict exhaustion.
"""

from .base import (
    RetryError,
    InvalidConfigError,
    Fault,
    AttemptsExhaustedError,
)

__all__ = [
    "RetryError",
    "InvalidConfigError",
    "Fault",
    "AttemptsExhaustedError",
]
