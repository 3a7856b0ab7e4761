"""
Domain Entity: SentimentScore

Lexicon hit counts for a text and the tone/band classifications built on them.
"""

from dataclasses import dataclass
from enum import Enum


class Tone(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class RatingBand(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


@dataclass(frozen=True)
class SentimentScore:
    positive_count: int = 0
    negative_count: int = 0

    @property
    def tone(self) -> Tone:
        if self.positive_count > self.negative_count:
            return Tone.POSITIVE
        if self.negative_count > self.positive_count:
            return Tone.NEGATIVE
        return Tone.NEUTRAL
