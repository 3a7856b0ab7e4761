"""
Domain Service: Sentiment Consistency Validator

Rejects text whose overall tone contradicts the average rating of the
records it summarizes.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..entities import FailureKind, RatingBand, Tone, ValidationFailure, ValidationRules
from .sentiment_scorer import SentimentScorer


def format_rating(value: float) -> str:
    """One decimal place, halves rounded up (1.25 -> "1.3")."""
    return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class SentimentConsistencyValidator:
    """
    Rating bands:
    - low:  average < low_rating_below (2.5)
    - high: average > high_rating_above (3.5)
    - mid:  everything in between, exempt from the check

    Only positive-on-low and negative-on-high fail; neutral tone always passes.
    """

    def __init__(self, rules: ValidationRules, scorer: Optional[SentimentScorer] = None):
        self.rules = rules
        self.scorer = scorer or SentimentScorer(rules)

    def rating_band(self, average_rating: float) -> RatingBand:
        if average_rating < self.rules.low_rating_below:
            return RatingBand.LOW
        if average_rating > self.rules.high_rating_above:
            return RatingBand.HIGH
        return RatingBand.MID

    def check(self, text: Optional[str], average_rating: float) -> Optional[ValidationFailure]:
        if not text:
            return None

        band = self.rating_band(average_rating)
        if band is RatingBand.MID:
            return None

        tone = self.scorer.score(text).tone
        if tone is Tone.POSITIVE and band is RatingBand.LOW:
            return ValidationFailure(
                kind=FailureKind.TONE_MISMATCH,
                detail=f"Positive tone detected despite low average rating ({format_rating(average_rating)}).",
            )
        if tone is Tone.NEGATIVE and band is RatingBand.HIGH:
            return ValidationFailure(
                kind=FailureKind.TONE_MISMATCH,
                detail=f"Negative tone detected despite high average rating ({format_rating(average_rating)}).",
            )
        return None
