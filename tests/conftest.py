"""
Shared test fixtures for Summary Guard tests
"""

from typing import List

import pytest
from unittest.mock import MagicMock

from summary_guard.application.interfaces import ITextGenerator, GenerationError
from summary_guard.config import get_guard_config
from summary_guard.domain.validation.entities import ValidationRules
from summary_guard.logging_utils import StructuredLogger


class RecordingTextGenerator(ITextGenerator):
    """
    Test double for the generation provider.

    Returns a fixed reply (or raises a fixed error) and appends every prompt
    to a caller-owned list.
    """

    def __init__(self, reply: str = "Mock response", calls: List[str] = None, error: Exception = None):
        self.reply = reply
        self.calls = calls if calls is not None else []
        self.error = error

    def generate(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def rules():
    """Rules built from the packaged YAML config."""
    return ValidationRules.from_config(get_guard_config())


@pytest.fixture
def mock_logger():
    """StructuredLogger stand-in whose calls can be asserted on."""
    return MagicMock(spec=StructuredLogger)


@pytest.fixture
def known_places():
    return ["Zen Tea House", "MatchaLab", "Green Leaf Cafe"]


@pytest.fixture
def make_generator():
    def _make(reply: str = "Mock response", calls: List[str] = None, error: Exception = None):
        return RecordingTextGenerator(reply=reply, calls=calls, error=error)
    return _make


@pytest.fixture
def generation_error():
    return GenerationError("provider unavailable")
