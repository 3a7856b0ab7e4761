"""Interfaces - Dependency contracts for use cases"""
from .text_generator import ITextGenerator, GenerationError

__all__ = ["ITextGenerator", "GenerationError"]
