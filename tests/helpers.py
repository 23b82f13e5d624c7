"""Error types and fallible operations shared by the tests."""


class StringError(Exception):
    """Error type used as a specific classifier."""


class StructError(Exception):
    """Unrelated error type."""


class WrappedStructError(StructError):
    """Subclass of StructError, matched through is-a."""


class ErrorProducer:
    """Callable that raises an error a fixed number of times, then succeeds."""

    def __init__(self, failures_before_success: int, error: BaseException, result: object = "ok"):
        self.failures_before_success = failures_before_success
        self.error = error
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls <= self.failures_before_success:
            raise self.error
        return self.result
