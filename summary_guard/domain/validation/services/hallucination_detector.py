"""
Domain Service: Hallucination Detector

Flags capitalized phrases that cannot be traced to any entity in the
supplied records.
"""

import logging
from typing import Dict, Optional, Sequence

from summary_guard.logging_utils import StructuredLogger
from summary_guard.models import ComponentType, EventType
from ..entities import FailureKind, ValidationFailure
from .entity_matcher import EntityMatcher
from .phrase_extractor import PhraseExtractor


class HallucinationDetector:
    """
    Composes the phrase extractor and the entity matcher.

    Every extracted phrase that matches none of the known entities is
    reported. A summary that names no known entity at all is only a weak
    signal and is logged, never rejected on that ground alone.
    """

    def __init__(
        self,
        extractor: PhraseExtractor,
        matcher: Optional[EntityMatcher] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.extractor = extractor
        self.matcher = matcher or EntityMatcher()
        self.logger = logger or StructuredLogger(ComponentType.SUMMARY_VALIDATOR)

    def check(
        self,
        text: Optional[str],
        known_entities: Sequence[str],
        trace_id: str = "unknown",
    ) -> Optional[ValidationFailure]:
        """
        Check a text for fabricated entity names.

        Args:
            text: Generated text; None or empty always passes
            known_entities: Entity names backed by the records
            trace_id: Trace ID for logging correlation

        Returns:
            ValidationFailure of kind FabricatedEntity, or None when clean
        """
        if not text:
            return None

        # dict keeps first-seen order while deduplicating
        unmatched: Dict[str, None] = {}
        any_known_match = False
        for phrase in self.extractor.iter_phrases(text):
            if self.matcher.matches(phrase, known_entities):
                any_known_match = True
            else:
                unmatched.setdefault(phrase, None)

        if known_entities and not any_known_match:
            self.logger.log_event(
                trace_id,
                EventType.WEAK_ENTITY_SIGNAL,
                {"known_entities": list(known_entities)},
                {"known_count": len(known_entities), "unmatched_count": len(unmatched)},
                level=logging.WARNING,
            )

        if unmatched:
            flagged = list(unmatched)
            return ValidationFailure(
                kind=FailureKind.FABRICATED_ENTITY,
                detail=", ".join(flagged),
                flagged=flagged,
            )
        return None
