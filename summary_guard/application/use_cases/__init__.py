"""Use cases - Application layer orchestrators"""
from .generate_summary_use_case import GenerateSummaryUseCase

__all__ = ["GenerateSummaryUseCase"]
