"""Tests for the LLM HTTP client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from storyquest.api.ai_client_requests import LLMServiceError, ai_generate_text


def _mock_response(body=None, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.text = "error body"
    resp.json.return_value = body
    resp.raise_for_status = MagicMock(
        side_effect=None if status < 400 else requests.exceptions.HTTPError("bad status", response=resp)
    )
    return resp


def _generate(prompt="Describe the tavern.", **kwargs):
    kwargs.setdefault("provider", "openai")
    kwargs.setdefault("api_key", "secret")
    return ai_generate_text(prompt, **kwargs)


class TestMockProvider:
    def test_echoes_prompt(self) -> None:
        with patch("requests.post") as mock_post:
            assert ai_generate_text("hello", provider="mock") == "Mock response for: hello"
        mock_post.assert_not_called()


class TestOpenAIProvider:
    def test_happy_path(self) -> None:
        body = {"choices": [{"message": {"content": "  The tavern is dark and smoky.  "}}]}
        with patch("requests.post", return_value=_mock_response(body)):
            assert _generate() == "The tavern is dark and smoky."

    def test_sends_chat_payload(self) -> None:
        body = {"choices": [{"message": {"content": "ok"}}]}
        with patch("requests.post", return_value=_mock_response(body)) as mock_post:
            _generate("my prompt", temperature=0.3, max_tokens=42, model="test-model")
        sent = mock_post.call_args.kwargs["json"]
        assert sent == {
            "model": "test-model",
            "messages": [{"role": "user", "content": "my prompt"}],
            "temperature": 0.3,
            "max_tokens": 42,
        }
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer secret"
        assert mock_post.call_args.kwargs["timeout"]

    def test_missing_key(self) -> None:
        with patch("requests.post") as mock_post:
            with pytest.raises(LLMServiceError):
                _generate(api_key="")
        mock_post.assert_not_called()

    def test_http_error(self) -> None:
        with patch("requests.post", return_value=_mock_response({}, status=500)):
            with pytest.raises(LLMServiceError):
                _generate()

    def test_timeout(self) -> None:
        with patch("requests.post", side_effect=requests.exceptions.Timeout("slow")):
            with pytest.raises(LLMServiceError):
                _generate()

    def test_connection_error(self) -> None:
        with patch("requests.post", side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(LLMServiceError):
                _generate()

    @pytest.mark.parametrize("body", [{}, {"choices": []}, {"choices": [{"message": {}}]}, None])
    def test_malformed_body(self, body) -> None:
        with patch("requests.post", return_value=_mock_response(body)):
            with pytest.raises(LLMServiceError):
                _generate()

    def test_invalid_json(self) -> None:
        resp = _mock_response()
        resp.json.side_effect = ValueError("not json")
        with patch("requests.post", return_value=resp):
            with pytest.raises(LLMServiceError):
                _generate()
