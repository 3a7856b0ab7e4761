"""
Domain Entities for Summary Validation

Pure value objects with no external dependencies.
"""

from .validation_failure import FailureKind, ValidationFailure, ValidationOutcome
from .sentiment_score import SentimentScore, Tone, RatingBand
from .validation_rules import ValidationRules

__all__ = [
    "FailureKind",
    "ValidationFailure",
    "ValidationOutcome",
    "SentimentScore",
    "Tone",
    "RatingBand",
    "ValidationRules",
]
