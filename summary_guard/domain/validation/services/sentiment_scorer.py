"""
Domain Service: Sentiment Scorer

Counts positive and negative lexicon hits in a text.
"""

import re
from typing import Optional

from ..entities import SentimentScore, ValidationRules

_WORD_RE = re.compile(r"[^\W_]+")


class SentimentScorer:
    """Whole-word, case-insensitive lexicon matching; every occurrence counts."""

    def __init__(self, rules: ValidationRules):
        self.positive_words = rules.positive_words
        self.negative_words = rules.negative_words

    def score(self, text: Optional[str]) -> SentimentScore:
        if not text:
            return SentimentScore()

        positive = negative = 0
        for word in _WORD_RE.findall(text.lower()):
            if word in self.positive_words:
                positive += 1
            elif word in self.negative_words:
                negative += 1

        return SentimentScore(positive_count=positive, negative_count=negative)
