"""
Domain Services for Summary Validation

These services contain pure business logic with no infrastructure dependencies.
"""

from .phrase_extractor import PhraseExtractor
from .entity_matcher import EntityMatcher
from .hallucination_detector import HallucinationDetector
from .sentiment_scorer import SentimentScorer
from .sentiment_validator import SentimentConsistencyValidator, format_rating
from .structure_validator import StructureValidator
from .summary_validator import (
    SummaryValidator,
    average_rating,
    coerce_records,
    known_entity_names,
    validate,
)

__all__ = [
    "PhraseExtractor",
    "EntityMatcher",
    "HallucinationDetector",
    "SentimentScorer",
    "SentimentConsistencyValidator",
    "StructureValidator",
    "format_rating",
    "SummaryValidator",
    "average_rating",
    "coerce_records",
    "known_entity_names",
    "validate",
]
