"""
Delay strategies.

A delay strategy maps the zero-based attempt index to a wait in seconds.
Strategies are pure: the controller only ever passes the current index.
"""

from typing import Callable

DelayFunc = Callable[[int], float]


def constant_delay(seconds: float) -> DelayFunc:
    """
    Build a strategy that always waits the same amount.

    Args:
        seconds: Fixed delay in seconds

    Returns:
        Delay function ignoring the attempt index
    """
    if seconds < 0:
        raise ValueError(f"Delay must be >= 0, got {seconds}")

    def delay(attempt: int) -> float:
        return seconds

    return delay


def constant_one_second_delay(attempt: int) -> float:
    """Wait one second between every attempt."""
    return 1


def exponential_delay(attempt: int) -> float:
    """Wait 2 ** attempt seconds, truncated to a whole second."""
    return int(2**attempt)
