"""
Unit tests for StructureValidator.
"""

import pytest
from summary_guard.domain.validation.entities import FailureKind, ValidationRules
from summary_guard.domain.validation.services import StructureValidator


@pytest.fixture
def structure_validator(rules):
    return StructureValidator(rules)


class TestCounting:
    """Tests for sentence and word counting."""

    def test_count_sentences(self):
        assert StructureValidator.count_sentences("One. Two! Three? Four") == 4

    def test_repeated_punctuation_is_one_boundary(self):
        assert StructureValidator.count_sentences("Wow!!! Really?!") == 2

    def test_only_punctuation_has_no_sentences(self):
        assert StructureValidator.count_sentences("...") == 0

    def test_count_words(self):
        assert StructureValidator.count_words("  a  b\tc\nd ") == 4


class TestStructureValidator:
    """Tests for length and format checks."""

    def test_three_sentences_pass(self, structure_validator):
        text = "This is a short summary. It has two sentences. And it ends with punctuation."
        assert structure_validator.check(text) is None

    def test_mixed_terminal_punctuation_passes(self, structure_validator):
        assert structure_validator.check("This is another good one! It's concise and clear?") is None

    def test_too_many_sentences(self, structure_validator):
        text = "Sentence one. Sentence two. Sentence three. Sentence four. This is too many sentences."
        failure = structure_validator.check(text)

        assert failure.kind is FailureKind.TOO_LONG
        assert "5 sentences (limit is 3)" in failure.detail

    def test_sentence_check_runs_before_word_check(self, structure_validator):
        text = " ".join(["very"] * 300) + ". Two. Three. Four. Five. Six. Seven."
        failure = structure_validator.check(text)
        assert "7 sentences (limit is 3)" in failure.detail

    def test_word_overflow_reports_sentence_message(self, structure_validator):
        text = "This is " + " ".join(["very"] * 200) + " long. Short one."
        failure = structure_validator.check(text)

        assert failure.kind is FailureKind.TOO_LONG
        assert failure.detail == "Summary too long: 2 sentences (limit is 3)."

    def test_missing_terminal_punctuation(self, structure_validator):
        failure = structure_validator.check("This is a sentence without punctuation")

        assert failure.kind is FailureKind.MISSING_TERMINAL_PUNCTUATION
        assert failure.detail == "Summary must end with punctuation (., ! or ?)."

    def test_trailing_whitespace_after_punctuation_allowed(self, structure_validator):
        assert structure_validator.check("Done.  \n") is None

    def test_length_checked_before_punctuation(self, structure_validator):
        failure = structure_validator.check("One. Two. Three. Four and no end")
        assert failure.kind is FailureKind.TOO_LONG

    def test_only_punctuation_passes(self, structure_validator):
        assert structure_validator.check("...") is None

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text_passes(self, structure_validator, text):
        assert structure_validator.check(text) is None

    def test_custom_limits(self):
        rules = ValidationRules(
            stopwords=frozenset(),
            positive_words=frozenset(),
            negative_words=frozenset(),
            max_sentences=1,
            max_words=3,
        )
        validator = StructureValidator(rules)

        assert validator.check("One two three.") is None
        assert validator.check("One. Two.").detail == "Summary too long: 2 sentences (limit is 1)."
        assert validator.check("One two three four.").kind is FailureKind.TOO_LONG
