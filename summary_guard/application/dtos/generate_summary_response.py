"""
DTO: Generate Summary Response

Data Transfer Object for profile-summary generation results.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass


@dataclass
class GenerateSummaryResponse:
    """Response from generating a profile summary."""

    trace_id: str
    status: str  # "success", "no_records", "generation_failed", "validation_failed"
    message: str
    summary: Optional[str] = None  # only set on success; rejected text is never returned
    failure_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for an API response."""
        return {
            "trace_id": self.trace_id,
            "status": self.status,
            "message": self.message,
            "summary": self.summary,
            "failure_kind": self.failure_kind,
        }
