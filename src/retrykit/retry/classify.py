"""
Error classifiers deciding which failures are worth retrying.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class ClassifierKind(str, Enum):
    """How a classifier compares against an error."""

    ANY = "any"  # matches every error
    SPECIFIC = "specific"  # matches a class (is-a) or an instance (identity)


@dataclass(frozen=True)
class Classifier:
    """
    A single retry-eligibility rule.

    Attributes:
        kind: ANY for the wildcard, SPECIFIC otherwise
        target: Exception class or instance for SPECIFIC classifiers
    """

    kind: ClassifierKind
    target: type[BaseException] | BaseException | None = None

    @classmethod
    def any(cls) -> "Classifier":
        """The wildcard classifier."""
        return cls(kind=ClassifierKind.ANY)

    @classmethod
    def specific(cls, target: type[BaseException] | BaseException) -> "Classifier":
        """Match errors that are (or chain to) the given class or instance."""
        if not is_classifiable(target):
            raise TypeError(
                f"Classifier target must be an exception class or instance, got {target!r}"
            )
        return cls(kind=ClassifierKind.SPECIFIC, target=target)

    @classmethod
    def of(cls, value: "Classifier | type[BaseException] | BaseException") -> "Classifier":
        """Coerce a raw exception class or instance into a classifier."""
        if isinstance(value, Classifier):
            return value
        return cls.specific(value)

    def matches(self, error: BaseException) -> bool:
        """Check whether the error, or anything in its chain, satisfies this rule."""
        if self.kind == ClassifierKind.ANY:
            return True

        for link in iter_chain(error):
            if isinstance(self.target, type):
                if isinstance(link, self.target):
                    return True
            elif link is self.target:
                return True
        return False

    def __repr__(self) -> str:
        if self.kind == ClassifierKind.ANY:
            return "Classifier.any()"
        return f"Classifier.specific({self.target!r})"


ANY_ERROR = Classifier.any()


def any_error() -> list[Classifier]:
    """Classifier list that retries on any error."""
    return [ANY_ERROR]


def is_classifiable(value: object) -> bool:
    """True for classifiers, exception classes and exception instances."""
    if isinstance(value, (Classifier, BaseException)):
        return True
    return isinstance(value, type) and issubclass(value, BaseException)


def iter_chain(error: BaseException) -> Iterator[BaseException]:
    """
    Walk an error and the errors it wraps.

    Follows ``__cause__`` first (explicit ``raise ... from``), then
    ``__context__`` unless suppressed. Each error is yielded once even if
    the chain loops back on itself.
    """
    seen: set[int] = set()
    current: BaseException | None = error

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def matches_any(error: BaseException, classifiers: Iterable[Classifier]) -> bool:
    """True if at least one classifier matches. Stops at the first hit."""
    return any(classifier.matches(error) for classifier in classifiers)
