import logging
import requests

from storyquest.config import (
    LLM_PROVIDER, LLM_API_KEY, LLM_API_URL, LLM_MODEL, LLM_TEMPERATURE, LLM_MAX_TOKENS, LLM_TIMEOUT
)

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Raised when the LLM provider cannot produce a completion."""


def _get_llm_auth_headers(api_key: str):
    """Generate auth headers for LLM API requests"""
    if not api_key:
        raise LLMServiceError("LLM API key is required. Set LLM_API_KEY or OPENAI_API_KEY.")
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}"
    }


def ai_generate_text(
    prompt: str,
    temperature: float = None,
    max_tokens: int = None,
    model: str = None,
    provider: str = None,
    api_key: str = None
) -> str:
    """
    Send a single-message chat completion request and return the generated text.

    The mock provider echoes the prompt without any network call.
    Raises LLMServiceError on missing credentials, transport errors,
    non-2xx responses and malformed bodies.
    """
    provider = (provider or LLM_PROVIDER).lower()
    if provider == "mock":
        return f"Mock response for: {prompt}"

    headers = _get_llm_auth_headers(api_key if api_key is not None else LLM_API_KEY)
    payload = {
        "model": model or LLM_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": temperature if temperature is not None else LLM_TEMPERATURE,
        "max_tokens": max_tokens or LLM_MAX_TOKENS
    }

    try:
        resp = requests.post(LLM_API_URL, json=payload, headers=headers, timeout=LLM_TIMEOUT)
        resp.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"[ai_generate_text] Request timed out after {LLM_TIMEOUT}s: {e}")
        raise LLMServiceError("LLM request timed out") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"[ai_generate_text] LLM API returned {resp.status_code}: {resp.text[:500]}")
        raise LLMServiceError(f"LLM API error: {resp.status_code}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"[ai_generate_text] Could not reach LLM API: {e}")
        raise LLMServiceError("Cannot connect to LLM API") from e

    try:
        content = resp.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"[ai_generate_text] Unexpected response format: {resp.text[:500]}")
        raise LLMServiceError("Unexpected response format from LLM API") from e

    if not isinstance(content, str):
        raise LLMServiceError("Unexpected response format from LLM API")
    return content.strip()
