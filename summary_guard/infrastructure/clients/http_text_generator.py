"""
Infrastructure: HTTP Text Generator

Concrete implementation of ITextGenerator using HTTP requests.
"""

import time
import requests
from typing import Optional
from summary_guard.application.interfaces import ITextGenerator, GenerationError
from summary_guard.logging_utils import StructuredLogger, ComponentType


class HttpTextGenerator(ITextGenerator):
    """
    HTTP client for a text-generation service.

    POSTs {"prompt", "max_output_tokens"} to <service_url>/generate and
    reads the "text" field of the JSON reply.
    """

    def __init__(
        self,
        service_url: str,
        timeout: float = 30,
        max_output_tokens: int = 1000,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP generation client.

        Args:
            service_url: Base URL of the generation service
            timeout: Request timeout in seconds
            max_output_tokens: Output budget forwarded to the service
            session: Optional requests session (connection reuse, tests)
        """
        self.service_url = service_url.rstrip("/")
        self.timeout = timeout
        self.max_output_tokens = max_output_tokens
        self.session = session
        self.logger = StructuredLogger(ComponentType.GENERATION_CLIENT)

    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Raises:
            GenerationError: On non-200 status, malformed reply or transport error
        """
        payload = {"prompt": prompt, "max_output_tokens": self.max_output_tokens}
        trace_id = f"gen_{int(time.time() * 1000)}"

        self.logger.log_message(
            trace_id=trace_id,
            direction="request",
            message_type="generate",
            payload=payload,
            metadata={"service_url": self.service_url},
        )

        post = self.session.post if self.session is not None else requests.post
        try:
            response = post(
                f"{self.service_url}/generate",
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            self.logger.logger.error(f"Generation request failed: {e}")
            raise GenerationError(f"Request failed: {e}") from e

        if response.status_code != 200:
            self.logger.logger.error(
                f"Generation service error {response.status_code}: {response.text}"
            )
            raise GenerationError(
                f"Generation service returned {response.status_code}: {response.text}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise GenerationError(f"Generation service returned invalid JSON: {e}") from e

        text = result.get("text") if isinstance(result, dict) else None
        if not isinstance(text, str):
            raise GenerationError("Generation service reply has no 'text' field")

        self.logger.log_message(
            trace_id=trace_id,
            direction="response",
            message_type="generate",
            payload=result,
            metadata={"text_length": len(text)},
        )
        return text
