"""
Infrastructure: Summary Guard Factory

Dependency injection factory for assembling all components.
Single source of truth for component wiring.
"""

import os
from typing import Any, Dict, Optional

from summary_guard.application.interfaces import ITextGenerator
from summary_guard.application.use_cases import GenerateSummaryUseCase
from summary_guard.config import get_guard_config
from summary_guard.domain.summary.services import PromptBuilder
from summary_guard.domain.validation.entities import ValidationRules
from summary_guard.domain.validation.services import SummaryValidator
from summary_guard.infrastructure.clients import HttpTextGenerator
from summary_guard.logging_utils import StructuredLogger, ComponentType


class SummaryGuardFactory:
    """
    Factory for creating Summary Guard components.

    Implements dependency injection pattern.
    """

    @staticmethod
    def create_validator(config: Optional[Dict[str, Any]] = None) -> SummaryValidator:
        """
        Create a SummaryValidator with rules from config.

        Args:
            config: Full config dict; the packaged YAML is used when omitted
        """
        return SummaryValidator(
            rules=ValidationRules.from_config(config if config is not None else get_guard_config()),
            logger=StructuredLogger(ComponentType.SUMMARY_VALIDATOR),
        )

    @staticmethod
    def create_text_generator(config: Optional[Dict[str, Any]] = None) -> HttpTextGenerator:
        """
        Create the HTTP generation client.

        GENERATION_SERVICE_URL and GENERATION_TIMEOUT override the config file.
        """
        generation = (config if config is not None else get_guard_config()).get("generation", {})
        return HttpTextGenerator(
            service_url=os.getenv("GENERATION_SERVICE_URL", generation.get("service_url", "http://localhost:8090")),
            timeout=float(os.getenv("GENERATION_TIMEOUT", generation.get("timeout", 30))),
            max_output_tokens=int(generation.get("max_output_tokens", 1000)),
        )

    @staticmethod
    def create_generate_summary_use_case(
        text_generator: Optional[ITextGenerator] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> GenerateSummaryUseCase:
        """
        Create fully wired GenerateSummaryUseCase.

        Args:
            text_generator: Provider to use; HttpTextGenerator from config when omitted
            config: Full config dict; the packaged YAML is used when omitted
        """
        config = config if config is not None else get_guard_config()
        validator = SummaryGuardFactory.create_validator(config)
        return GenerateSummaryUseCase(
            text_generator=text_generator or SummaryGuardFactory.create_text_generator(config),
            validator=validator,
            prompt_builder=PromptBuilder(max_sentences=validator.rules.max_sentences),
            logger=StructuredLogger(ComponentType.SUMMARY_GENERATOR),
        )
