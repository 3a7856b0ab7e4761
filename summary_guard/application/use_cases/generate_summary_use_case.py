"""
Use Case: Generate Summary

Application layer orchestrator for profile-summary generation.
Builds the prompt, calls the generation provider and validates the reply
against the same record snapshot before anything is returned.
"""

import logging

from ..dtos import GenerateSummaryRequest, GenerateSummaryResponse
from ..interfaces import ITextGenerator, GenerationError
from summary_guard.domain.summary.services import PromptBuilder
from summary_guard.domain.validation.services import SummaryValidator
from summary_guard.logging_utils import StructuredLogger
from summary_guard.models import EventType


class GenerateSummaryUseCase:
    """
    Use case for generating validated profile summaries.

    Orchestrates:
    1. Prompt construction from the record snapshot
    2. Text generation via the injected provider
    3. Validation of the generated text against the same snapshot

    Failures are reported in the response; the use case never retries
    generation and never returns text that failed validation.
    """

    def __init__(
        self,
        text_generator: ITextGenerator,
        validator: SummaryValidator,
        prompt_builder: PromptBuilder,
        logger: StructuredLogger,
    ):
        """
        Initialize use case.

        Args:
            text_generator: Provider producing raw summary text
            validator: Domain service validating generated text
            prompt_builder: Domain service assembling the prompt
            logger: Logger for audit trail
        """
        self.text_generator = text_generator
        self.validator = validator
        self.prompt_builder = prompt_builder
        self.logger = logger

    def execute(self, request: GenerateSummaryRequest) -> GenerateSummaryResponse:
        """
        Execute summary generation.

        Args:
            request: GenerateSummaryRequest with subject and record snapshot

        Returns:
            GenerateSummaryResponse with the summary or an error status
        """
        records = list(request.records)
        self.logger.log_event(
            request.trace_id,
            EventType.SUMMARY_REQUESTED,
            {"subject_id": request.subject_id},
            {"record_count": len(records)},
        )

        if not records:
            return GenerateSummaryResponse(
                trace_id=request.trace_id,
                status="no_records",
                message="No logged experiences to summarize.",
            )

        prompt = self.prompt_builder.build_profile_summary_prompt(request.subject_id, records)

        try:
            text = self.text_generator.generate(prompt)
        except GenerationError as e:
            self.logger.log_event(
                request.trace_id,
                EventType.GENERATION_FAILED,
                {"error": str(e)},
                level=logging.ERROR,
            )
            return GenerateSummaryResponse(
                trace_id=request.trace_id,
                status="generation_failed",
                message=f"summary generation failed: {e}",
            )

        outcome = self.validator.validate(text, records, trace_id=request.trace_id)
        if not outcome.accepted:
            return GenerateSummaryResponse(
                trace_id=request.trace_id,
                status="validation_failed",
                message=f"summary validation failed: {outcome.failure.message}",
                failure_kind=outcome.failure.kind.value,
            )

        self.logger.log_event(
            request.trace_id,
            EventType.SUMMARY_GENERATED,
            {"subject_id": request.subject_id},
            {"summary_length": len(outcome.text or "")},
        )
        return GenerateSummaryResponse(
            trace_id=request.trace_id,
            status="success",
            message="Summary generated.",
            summary=outcome.text,
        )
