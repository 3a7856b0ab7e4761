"""
Domain Entity: ValidationRules

Every tunable table and limit used by the validation services. Services
receive an instance instead of reading literals, so lexicons and limits can
be changed from config or swapped in tests.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional


def _words(values: Iterable[str], lower: bool = False) -> FrozenSet[str]:
    return frozenset(v.lower() if lower else v for v in values)


@dataclass(frozen=True)
class ValidationRules:
    """
    Attributes:
        stopwords: Case-sensitive single words never treated as entity candidates
        positive_words: Lower-cased positive lexicon
        negative_words: Lower-cased negative lexicon
        low_rating_below: Ratings strictly below this fall in the low band
        high_rating_above: Ratings strictly above this fall in the high band
        max_sentences: Sentence limit for the structural check
        max_words: Word limit for the structural check
    """
    stopwords: FrozenSet[str]
    positive_words: FrozenSet[str]
    negative_words: FrozenSet[str]
    low_rating_below: float = 2.5
    high_rating_above: float = 3.5
    max_sentences: int = 3
    max_words: int = 150

    def __post_init__(self):
        """Validate invariants."""
        if self.low_rating_below > self.high_rating_above:
            raise ValueError(
                f"low_rating_below ({self.low_rating_below}) must not exceed "
                f"high_rating_above ({self.high_rating_above})"
            )
        if self.max_sentences < 1 or self.max_words < 1:
            raise ValueError("max_sentences and max_words must be positive")
        overlap = self.positive_words & self.negative_words
        if overlap:
            raise ValueError(f"words listed as both positive and negative: {sorted(overlap)}")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "ValidationRules":
        """
        Build rules from the `validation` section of the guard config.

        Args:
            config: Full config dict; loaded via get_guard_config() when omitted
        """
        if config is None:
            from summary_guard.config import get_guard_config
            config = get_guard_config()

        section = config.get("validation", {})
        sentiment = section.get("sentiment", {})
        bands = section.get("rating_bands", {})
        limits = section.get("limits", {})

        return cls(
            stopwords=_words(section.get("stopwords", [])),
            positive_words=_words(sentiment.get("positive", []), lower=True),
            negative_words=_words(sentiment.get("negative", []), lower=True),
            low_rating_below=float(bands.get("low_below", 2.5)),
            high_rating_above=float(bands.get("high_above", 3.5)),
            max_sentences=int(limits.get("max_sentences", 3)),
            max_words=int(limits.get("max_words", 150)),
        )
