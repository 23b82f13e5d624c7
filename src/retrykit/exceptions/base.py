"""
Base exception classes for retry operations.

Whether an error is retried is decided only by the classifiers in the
active RetryConfig, never by the exception itself.
"""


class RetryError(Exception):
    """Base exception for all retrykit errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidConfigError(RetryError, ValueError):
    """Raised when a retry policy fails validation."""

    def __init__(self, message: str = "Invalid retry config", *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


class Fault(RetryError):
    """
    Raised by an operation to signal an unrecoverable failure.

    The retry loop stops on the first fault, reports it to the listener
    and does not re-raise it. Chain the underlying cause with
    ``raise Fault(...) from exc``.
    """

    def __init__(self, message: str = "Unrecoverable fault"):
        super().__init__(message)


class AttemptsExhaustedError(RetryError):
    """Raised in strict mode when every attempt failed with a retryable error."""

    def __init__(
        self,
        attempts: int,
        last_error: BaseException | None = None,
        message: str | None = None,
    ):
        super().__init__(message or f"Gave up after {attempts} attempts")
        self.attempts = attempts
        self.last_error = last_error

    def __str__(self) -> str:
        if self.last_error is not None:
            return f"{self.message}: {self.last_error!r}"
        return self.message
