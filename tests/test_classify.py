"""Tests for error classification."""

import pytest

from retrykit.retry import ANY_ERROR, Classifier, ClassifierKind, matches_any

from helpers import StringError, StructError, WrappedStructError


class TestWildcard:
    """The ANY classifier."""

    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("direct"),
            StringError(),
            StructError(),
            KeyError("k"),
            OSError(2, "missing"),
        ],
    )
    def test_any_matches_every_error(self, error):
        """Wildcard accepts any error type or value."""
        assert matches_any(error, [ANY_ERROR]) is True

    def test_any_is_explicit_kind(self):
        """Wildcard is a tag, not a sentinel exception."""
        assert ANY_ERROR.kind == ClassifierKind.ANY
        assert ANY_ERROR.target is None
        assert Classifier.any() == ANY_ERROR


class TestSpecificClass:
    """Exception classes match by is-a."""

    def test_same_type_matches(self):
        """Instance of the listed class matches."""
        assert Classifier.specific(StringError).matches(StringError()) is True

    def test_subclass_matches(self):
        """Subclass instances match the parent."""
        assert Classifier.specific(StructError).matches(WrappedStructError()) is True

    def test_unrelated_type_does_not_match(self):
        """Different error type is rejected."""
        assert Classifier.specific(StringError).matches(StructError()) is False

    def test_parent_does_not_match_child_classifier(self):
        """is-a only goes one way."""
        assert Classifier.specific(WrappedStructError).matches(StructError()) is False


class TestSpecificInstance:
    """Exception instances match by identity."""

    def test_same_instance_matches(self):
        """The exact object matches."""
        sentinel = StringError("exact")
        assert Classifier.specific(sentinel).matches(sentinel) is True

    def test_equal_looking_instance_does_not_match(self):
        """Same type and message is still a different error."""
        assert Classifier.specific(StringError("x")).matches(StringError("x")) is False


class TestChain:
    """Matching through wrapped errors."""

    def test_matches_explicit_cause(self):
        """raise ... from exc exposes exc to classifiers."""
        try:
            try:
                raise StringError("inner")
            except StringError as inner:
                raise RuntimeError("outer") from inner
        except RuntimeError as outer:
            error = outer

        assert Classifier.specific(StringError).matches(error) is True

    def test_matches_implicit_context(self):
        """Errors raised while handling another keep it in __context__."""
        try:
            try:
                raise StringError("inner")
            except StringError:
                raise RuntimeError("outer")
        except RuntimeError as outer:
            error = outer

        assert Classifier.specific(StringError).matches(error) is True

    def test_suppressed_context_is_not_followed(self):
        """raise ... from None hides the original error."""
        try:
            try:
                raise StringError("inner")
            except StringError:
                raise RuntimeError("outer") from None
        except RuntimeError as outer:
            error = outer

        assert Classifier.specific(StringError).matches(error) is False

    def test_matches_wrapped_instance_by_identity(self):
        """A specific instance is found deep in the chain."""
        sentinel = StringError("root")
        middle = StructError("middle")
        middle.__cause__ = sentinel
        top = RuntimeError("top")
        top.__cause__ = middle

        assert Classifier.specific(sentinel).matches(top) is True

    def test_cyclic_chain_terminates(self):
        """A chain that loops back does not hang."""
        first = StructError("a")
        second = StructError("b")
        first.__cause__ = second
        second.__cause__ = first

        assert Classifier.specific(StringError).matches(first) is False


class TestMatchesAny:
    """Matching against a classifier set."""

    def test_first_match_wins(self):
        """Later classifiers are not consulted after a hit."""
        calls: list[str] = []

        class Recording(Classifier):
            def matches(self, error):
                calls.append(repr(self.target))
                return super().matches(error)

        classifiers = [
            Recording(kind=ClassifierKind.SPECIFIC, target=StringError),
            Recording(kind=ClassifierKind.SPECIFIC, target=StructError),
        ]

        assert matches_any(StringError(), classifiers) is True
        assert len(calls) == 1

    def test_no_match_in_set(self):
        """Error outside every classifier is rejected."""
        classifiers = [Classifier.specific(StringError), Classifier.specific(KeyError)]

        assert matches_any(StructError(), classifiers) is False

    def test_order_does_not_change_result(self):
        """Reordering classifiers keeps the boolean outcome."""
        a = Classifier.specific(StringError)
        b = Classifier.specific(StructError)

        assert matches_any(StructError(), [a, b]) == matches_any(StructError(), [b, a])


class TestCoercion:
    """Building classifiers from raw values."""

    def test_of_wraps_class(self):
        """Exception classes become specific classifiers."""
        classifier = Classifier.of(StringError)

        assert classifier.kind == ClassifierKind.SPECIFIC
        assert classifier.target is StringError

    def test_of_passes_classifier_through(self):
        """Existing classifiers are returned unchanged."""
        assert Classifier.of(ANY_ERROR) is ANY_ERROR

    def test_specific_rejects_non_exception(self):
        """Targets must be exceptions."""
        with pytest.raises(TypeError):
            Classifier.specific("StringError")
        with pytest.raises(TypeError):
            Classifier.specific(int)
