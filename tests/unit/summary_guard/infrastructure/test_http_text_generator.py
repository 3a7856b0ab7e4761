"""
Unit tests for HttpTextGenerator.

requests.post is patched; no network access.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from summary_guard.application.interfaces import GenerationError
from summary_guard.infrastructure.clients import HttpTextGenerator


def mock_response(status=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


class TestHttpTextGenerator:

    @patch("summary_guard.infrastructure.clients.http_text_generator.requests.post")
    def test_generate_success(self, mock_post):
        mock_post.return_value = mock_response(json_data={"text": "You love Zen Tea House."})
        client = HttpTextGenerator("http://gen:8090/", timeout=5, max_output_tokens=200)

        assert client.generate("prompt") == "You love Zen Tea House."

        mock_post.assert_called_once_with(
            "http://gen:8090/generate",
            json={"prompt": "prompt", "max_output_tokens": 200},
            timeout=5,
        )

    @patch("summary_guard.infrastructure.clients.http_text_generator.requests.post")
    def test_non_200_raises(self, mock_post):
        mock_post.return_value = mock_response(status=503, text="loading")

        with pytest.raises(GenerationError, match="503"):
            HttpTextGenerator("http://gen").generate("prompt")

    @patch("summary_guard.infrastructure.clients.http_text_generator.requests.post")
    def test_transport_error_raises(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(GenerationError, match="Request failed"):
            HttpTextGenerator("http://gen").generate("prompt")

    @patch("summary_guard.infrastructure.clients.http_text_generator.requests.post")
    def test_invalid_json_raises(self, mock_post):
        mock_post.return_value = mock_response(json_data=ValueError("bad json"))

        with pytest.raises(GenerationError, match="invalid JSON"):
            HttpTextGenerator("http://gen").generate("prompt")

    @patch("summary_guard.infrastructure.clients.http_text_generator.requests.post")
    def test_missing_text_field_raises(self, mock_post):
        mock_post.return_value = mock_response(json_data={"output": "x"})

        with pytest.raises(GenerationError, match="no 'text' field"):
            HttpTextGenerator("http://gen").generate("prompt")

    def test_uses_session_when_given(self):
        session = MagicMock()
        session.post.return_value = mock_response(json_data={"text": "ok."})

        assert HttpTextGenerator("http://gen", session=session).generate("p") == "ok."
        session.post.assert_called_once()
