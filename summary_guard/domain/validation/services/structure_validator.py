"""
Domain Service: Structure Validator

Sentence count, word count and terminal punctuation checks.
"""

import re
from typing import Optional

from ..entities import FailureKind, ValidationFailure, ValidationRules

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+\s*")
_TERMINAL_RE = re.compile(r"[.!?]\s*$")


class StructureValidator:
    """Checks run sentence count -> word count -> terminal punctuation; first failure wins."""

    def __init__(self, rules: ValidationRules):
        self.max_sentences = rules.max_sentences
        self.max_words = rules.max_words

    @staticmethod
    def count_sentences(text: str) -> int:
        return sum(1 for segment in _SENTENCE_SPLIT_RE.split(text) if segment.strip())

    @staticmethod
    def count_words(text: str) -> int:
        return len(text.split())

    def check(self, text: Optional[str]) -> Optional[ValidationFailure]:
        if not text:
            return None

        sentences = self.count_sentences(text)
        too_long = ValidationFailure(
            kind=FailureKind.TOO_LONG,
            detail=f"Summary too long: {sentences} sentences (limit is {self.max_sentences}).",
        )
        if sentences > self.max_sentences:
            return too_long
        # Word overflow is reported with the sentence-count message, matching
        # the behaviour existing callers assert on.
        # TODO: give word overflow its own detail once callers stop matching on this text.
        if self.count_words(text) > self.max_words:
            return too_long

        if not _TERMINAL_RE.search(text):
            return ValidationFailure(
                kind=FailureKind.MISSING_TERMINAL_PUNCTUATION,
                detail="Summary must end with punctuation (., ! or ?).",
            )
        return None
