"""
Unit tests for ValidationRules and config loading.
"""

import pytest
from summary_guard.config import clear_config_cache, get_guard_config
from summary_guard.domain.validation.entities import (
    FailureKind,
    ValidationFailure,
    ValidationOutcome,
    ValidationRules,
)


class TestRulesFromConfig:
    """Tests for building rules from the packaged YAML."""

    def test_packaged_defaults(self, rules):
        assert rules.max_sentences == 3
        assert rules.max_words == 150
        assert rules.low_rating_below == 2.5
        assert rules.high_rating_above == 3.5
        assert {"This", "The", "It", "I"} <= rules.stopwords
        assert {"love", "great", "perfect", "amazing", "enjoyed"} <= rules.positive_words
        assert {"hate", "terrible", "disliked", "weak", "bitter", "bad"} <= rules.negative_words

    def test_lexicons_lowercased(self):
        rules = ValidationRules.from_config(
            {"validation": {"sentiment": {"positive": ["Yummy"], "negative": ["MEH"]}}}
        )
        assert rules.positive_words == frozenset({"yummy"})
        assert rules.negative_words == frozenset({"meh"})

    def test_missing_sections_use_defaults(self):
        rules = ValidationRules.from_config({})
        assert rules.max_sentences == 3
        assert rules.stopwords == frozenset()

    def test_overlapping_lexicons_rejected(self):
        with pytest.raises(ValueError, match="both positive and negative"):
            ValidationRules.from_config(
                {"validation": {"sentiment": {"positive": ["fine"], "negative": ["fine"]}}}
            )

    def test_inverted_bands_rejected(self):
        with pytest.raises(ValueError, match="must not exceed"):
            ValidationRules(
                stopwords=frozenset(),
                positive_words=frozenset(),
                negative_words=frozenset(),
                low_rating_below=4.0,
                high_rating_above=2.0,
            )


class TestConfigCache:
    """Tests for the module-level config cache."""

    def test_config_cached(self):
        assert get_guard_config() is get_guard_config()

    def test_env_override(self, tmp_path, monkeypatch):
        custom = tmp_path / "guard.yaml"
        custom.write_text("validation:\n  limits:\n    max_sentences: 7\n")
        monkeypatch.setenv("SUMMARY_GUARD_CONFIG", str(custom))
        clear_config_cache()
        try:
            assert ValidationRules.from_config().max_sentences == 7
        finally:
            clear_config_cache()


class TestValidationFailure:
    """Tests for failure/outcome value objects."""

    def test_fabricated_entity_message(self):
        failure = ValidationFailure(FailureKind.FABRICATED_ENTITY, "Starbuckz", ["Starbuckz"])
        assert str(failure) == "Detected possible fabricated place names in summary: Starbuckz"

    def test_other_kinds_message_is_detail(self):
        failure = ValidationFailure(FailureKind.TOO_LONG, "Summary too long: 5 sentences (limit is 3).")
        assert failure.message == failure.detail

    def test_outcome_accepted(self):
        assert ValidationOutcome(text="ok.").accepted is True
        assert ValidationOutcome(
            text="ok", failure=ValidationFailure(FailureKind.MISSING_TERMINAL_PUNCTUATION, "x")
        ).accepted is False
