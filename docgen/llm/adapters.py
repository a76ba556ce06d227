# docgen/llm/adapters.py
"""
Provider adapters for documentation text generation.

Supported providers:
- anthropic (default): Messages API, one user message, first content part's text
- openai: Responses API
- gemini: Developer API (google-genai)

Common controls (from the ``global`` block of the content plan):
- maxTokens: int
- temperature: float (optional)
- timeout: int seconds

Failures are not retried here: a failed call aborts the run.
"""

from __future__ import annotations
import os
from typing import Optional

from docgen.errors import GenerationError
from docgen.models import GlobalSettings
from docgen.utils import get_logger, redact_secrets

logger = get_logger(__name__)


def call_anthropic(prompt: str, model: str, max_tokens: int, temperature: Optional[float], timeout: int, api_key: Optional[str] = None) -> str:
    from anthropic import Anthropic
    api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise GenerationError("ANTHROPIC_API_KEY is required for Anthropic provider")

    client = Anthropic(api_key=api_key, timeout=timeout)
    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature
    resp = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        messages=[{"role": "user", "content": prompt}],
        **kwargs,
    )
    parts = getattr(resp, "content", None) or []
    if not parts:
        return ""
    return getattr(parts[0], "text", None) or ""


def call_openai(prompt: str, model: str, max_tokens: int, temperature: Optional[float], timeout: int, api_key: Optional[str] = None) -> str:
    from openai import OpenAI
    api_key = api_key or os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise GenerationError("OPENAI_API_KEY is required for OpenAI provider")
    base_url = os.getenv("OPENAI_BASE_URL")

    client = OpenAI(api_key=api_key, base_url=base_url) if base_url else OpenAI(api_key=api_key)
    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature
    resp = client.with_options(timeout=timeout).responses.create(
        model=model,
        input=prompt,
        max_output_tokens=max_tokens,
        **kwargs,
    )
    return getattr(resp, "output_text", None) or ""


def call_gemini(prompt: str, model: str, max_tokens: int, temperature: Optional[float], timeout: int, api_key: Optional[str] = None) -> str:
    from google import genai
    api_key = api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise GenerationError("GOOGLE_API_KEY (or GEMINI_API_KEY) is required for Gemini Developer API")

    client = genai.Client(api_key=api_key)
    config = {"max_output_tokens": max_tokens}
    if temperature is not None:
        config["temperature"] = temperature
    resp = client.models.generate_content(
        model=model,
        contents=prompt,
        config=config,
    )
    return getattr(resp, "text", None) or ""


_PROVIDERS = {
    "anthropic": call_anthropic,
    "openai": call_openai,
    "gemini": call_gemini,
}


def call_with_options(provider: str, prompt: str, model: str, max_tokens: int = 4000, temperature: Optional[float] = None, timeout: int = 600, api_key: Optional[str] = None) -> str:
    provider = (provider or "").lower()
    call = _PROVIDERS.get(provider)
    if call is None:
        raise GenerationError(f"Unknown aiProvider={provider}")
    return call(prompt, model, max_tokens, temperature, timeout, api_key)


class ProviderGenerator:
    """``TextGenerator`` backed by one of the provider adapters."""

    def __init__(self, settings: GlobalSettings, api_key: Optional[str] = None):
        self.settings = settings
        self.api_key = api_key

    def generate(self, prompt: str, model: str) -> str:
        logger.info("Sending request provider=%s model=%s prompt_chars=%d", self.settings.ai_provider, model, len(prompt))
        try:
            text = call_with_options(
                self.settings.ai_provider,
                prompt,
                model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                timeout=self.settings.timeout,
                api_key=self.api_key,
            )
        except GenerationError:
            raise
        except Exception as e:
            message = redact_secrets(str(e))
            logger.error("Error generating content: %s", message)
            raise GenerationError(f"{self.settings.ai_provider} call failed: {message}") from e

        if not text.strip():
            raise GenerationError(f"{self.settings.ai_provider} returned no text")
        return text
