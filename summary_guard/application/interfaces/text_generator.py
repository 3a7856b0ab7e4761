"""
ITextGenerator Interface

Interface for the external text-generation provider.
This abstraction keeps the use case independent of any concrete provider.
"""

from abc import ABC, abstractmethod


class GenerationError(Exception):
    """Raised when the generation provider fails to return text."""
    pass


class ITextGenerator(ABC):
    """
    Interface for text generation.

    The provider is opaque: a prompt goes in, text comes out, and the call
    may fail. Implementations raise GenerationError on failure instead of
    returning placeholder text.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Fully assembled prompt

        Returns:
            Raw generated text

        Raises:
            GenerationError: When the provider cannot produce text
        """
        pass
