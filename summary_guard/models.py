from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, Dict, Any
from enum import Enum
import time

class ComponentType(str, Enum):
    SUMMARY_VALIDATOR = "SummaryValidator"
    SUMMARY_GENERATOR = "SummaryGenerator"
    GENERATION_CLIENT = "GenerationClient"

class EventType(str, Enum):
    VALIDATION_PASSED = "Validation_Passed"
    VALIDATION_FAILED = "Validation_Failed"
    SUMMARY_REQUESTED = "Summary_Requested"
    SUMMARY_GENERATED = "Summary_Generated"
    GENERATION_FAILED = "Generation_Failed"
    WEAK_ENTITY_SIGNAL = "Weak_Entity_Signal"
    CHECK_COMPLETED = "Check_Completed"

class LogEntry(BaseModel):
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    event_type: EventType
    payload_hash: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None

class ReferenceRecord(BaseModel):
    """
    Minimal view of one logged experience.

    Only entity_name and rating take part in validation; the remaining
    fields feed the summary prompt.
    """
    entity_name: str = Field(min_length=1, validation_alias=AliasChoices("entity_name", "entityName", "placeId"))
    rating: float = Field(ge=1, le=5)
    sweetness: Optional[float] = Field(default=None, ge=1, le=5)
    strength: Optional[float] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None

    model_config = {"frozen": True}
