"""
Domain Service: Summary Validator

Orchestrates the hallucination, sentiment and structure checks for one
generated summary. Pure business logic: the only side effect is logging.
"""

import logging
from statistics import fmean
from typing import Any, List, Mapping, Optional, Sequence, Union

from summary_guard.logging_utils import StructuredLogger
from summary_guard.models import ComponentType, EventType, ReferenceRecord
from ..entities import ValidationFailure, ValidationOutcome, ValidationRules
from .entity_matcher import EntityMatcher
from .hallucination_detector import HallucinationDetector
from .phrase_extractor import PhraseExtractor
from .sentiment_scorer import SentimentScorer
from .sentiment_validator import SentimentConsistencyValidator
from .structure_validator import StructureValidator

RecordLike = Union[ReferenceRecord, Mapping[str, Any]]


def coerce_records(records: Optional[Sequence[RecordLike]]) -> List[ReferenceRecord]:
    """Accept ReferenceRecord instances or plain dicts (entity_name/entityName/placeId + rating)."""
    if not records:
        return []
    return [
        r if isinstance(r, ReferenceRecord) else ReferenceRecord.model_validate(r)
        for r in records
    ]


def known_entity_names(records: Sequence[ReferenceRecord]) -> List[str]:
    """Distinct entity names in first-seen order."""
    return list(dict.fromkeys(r.entity_name for r in records))


def average_rating(records: Sequence[ReferenceRecord]) -> Optional[float]:
    """Arithmetic mean of ratings, None when there are no records."""
    if not records:
        return None
    return fmean(r.rating for r in records)


class SummaryValidator:
    """
    Domain service validating generated summaries against the records
    that justify them.

    Run order, fail-fast:
    1. Hallucination detector (skipped without records)
    2. Sentiment consistency (skipped without records)
    3. Structure validator

    Reference data (known entities, average rating) is derived fresh from
    the records on every call and never cached.
    """

    def __init__(
        self,
        rules: Optional[ValidationRules] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize validator.

        Args:
            rules: Lexicons and limits; loaded from the guard config when omitted
            logger: Structured logger for audit events
        """
        self.rules = rules or ValidationRules.from_config()
        self.logger = logger or StructuredLogger(ComponentType.SUMMARY_VALIDATOR)
        self.hallucination_detector = HallucinationDetector(
            PhraseExtractor(self.rules), EntityMatcher(), self.logger
        )
        self.sentiment_validator = SentimentConsistencyValidator(
            self.rules, SentimentScorer(self.rules)
        )
        self.structure_validator = StructureValidator(self.rules)

    def validate(
        self,
        text: Optional[str],
        records: Optional[Sequence[RecordLike]] = None,
        trace_id: str = "unknown",
    ) -> ValidationOutcome:
        """
        Validate a generated summary.

        Args:
            text: Generated text; None or empty passes every check
            records: Snapshot of the records the text was generated from
            trace_id: Trace ID for logging correlation

        Returns:
            ValidationOutcome carrying the unchanged text, or the first failure
        """
        snapshot = coerce_records(records)
        failure = self._first_failure(text, snapshot, trace_id)

        metrics = {"record_count": len(snapshot), "text_length": len(text or "")}
        if failure is None:
            self.logger.log_event(
                trace_id, EventType.VALIDATION_PASSED, {"text": text}, metrics, level=logging.DEBUG
            )
            return ValidationOutcome(text=text)

        metrics.update({"kind": failure.kind.value, "detail": failure.detail})
        self.logger.log_event(trace_id, EventType.VALIDATION_FAILED, {"text": text}, metrics)
        return ValidationOutcome(text=text, failure=failure)

    def _first_failure(
        self, text: Optional[str], records: List[ReferenceRecord], trace_id: str
    ) -> Optional[ValidationFailure]:
        if records:
            failure = self.hallucination_detector.check(
                text, known_entity_names(records), trace_id
            )
            self._log_check(trace_id, "hallucination", failure)
            if failure:
                return failure

            failure = self.sentiment_validator.check(text, average_rating(records))
            self._log_check(trace_id, "sentiment", failure)
            if failure:
                return failure

        failure = self.structure_validator.check(text)
        self._log_check(trace_id, "structure", failure)
        return failure

    def _log_check(self, trace_id: str, check: str, failure: Optional[ValidationFailure]):
        metrics = {"check": check, "passed": failure is None}
        if failure is not None:
            metrics["kind"] = failure.kind.value
        self.logger.log_event(
            trace_id, EventType.CHECK_COMPLETED, {"check": check}, metrics, level=logging.DEBUG
        )


_default_validator: Optional[SummaryValidator] = None


def validate(
    text: Optional[str], records: Optional[Sequence[RecordLike]] = None
) -> ValidationOutcome:
    """Validate with the default, config-backed rules."""
    global _default_validator
    if _default_validator is None:
        _default_validator = SummaryValidator()
    return _default_validator.validate(text, records)
