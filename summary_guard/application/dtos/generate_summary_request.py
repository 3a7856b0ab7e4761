"""
DTO: Generate Summary Request

Data Transfer Object for profile-summary generation requests.
"""

from typing import Any, Dict, List
from dataclasses import dataclass, field
import uuid

from summary_guard.models import ReferenceRecord


@dataclass
class GenerateSummaryRequest:
    """
    Request to generate a validated profile summary.

    `records` is the snapshot the summary is generated from; the same list
    is used for validation.
    """

    subject_id: str
    records: List[ReferenceRecord]
    trace_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerateSummaryRequest":
        """Create from dictionary (API request body)."""
        records = [ReferenceRecord.model_validate(r) for r in data.get("records", [])]
        kwargs = {"subject_id": data.get("subject_id", "unknown"), "records": records}
        if data.get("trace_id"):
            kwargs["trace_id"] = data["trace_id"]
        return cls(**kwargs)
