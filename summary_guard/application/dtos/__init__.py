"""DTOs for the summary generation use case"""
from .generate_summary_request import GenerateSummaryRequest
from .generate_summary_response import GenerateSummaryResponse

__all__ = ["GenerateSummaryRequest", "GenerateSummaryResponse"]
