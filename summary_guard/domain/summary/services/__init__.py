"""
Domain Services for Summary Generation
"""

from .prompt_builder import PromptBuilder

__all__ = ["PromptBuilder"]
