"""
Summary Guard

Validation pipeline for generated experience summaries.

Architecture:
- Phrase extraction + entity matching reject fabricated place names
- Lexicon sentiment scoring rejects tone that contradicts the ratings
- Structural checks reject over-long or unterminated text
- The orchestrator fails fast on the first violation and never edits text
"""

__version__ = "0.1.0"

from .models import ReferenceRecord, ComponentType, EventType
from .domain.validation.entities import (
    FailureKind, ValidationFailure, ValidationOutcome, ValidationRules
)
from .domain.validation.services import SummaryValidator, validate
