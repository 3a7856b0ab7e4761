"""
Domain Entity: ValidationFailure

Typed rejection produced by one of the summary checks, plus the outcome
wrapper returned by the orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class FailureKind(str, Enum):
    FABRICATED_ENTITY = "FabricatedEntity"
    TONE_MISMATCH = "ToneMismatch"
    TOO_LONG = "TooLong"
    MISSING_TERMINAL_PUNCTUATION = "MissingTerminalPunctuation"


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single validation violation.

    Attributes:
        kind: Which check rejected the text
        detail: Human-readable detail (offending phrases, computed counts, rating)
        flagged: Offending phrases, only populated for FabricatedEntity
    """
    kind: FailureKind
    detail: str
    flagged: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        """User-facing sentence for this failure."""
        if self.kind is FailureKind.FABRICATED_ENTITY:
            return f"Detected possible fabricated place names in summary: {self.detail}"
        return self.detail

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating one generated text.

    On acceptance `text` is the exact object that was passed in.
    """
    text: Optional[str]
    failure: Optional[ValidationFailure] = None

    @property
    def accepted(self) -> bool:
        return self.failure is None
