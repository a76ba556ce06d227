import os
import sys
import types

import pytest

# Ensure logger writes to a temp folder within tests
os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "_logs"))

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from docgen.errors import GenerationError
from docgen.llm import adapters
from docgen.models import GlobalSettings


def _fake_anthropic(monkeypatch, content):
    calls = []

    class FakeMessages:
        def create(self, **kwargs):
            calls.append(kwargs)
            return types.SimpleNamespace(content=content)

    class FakeAnthropic:
        def __init__(self, api_key, timeout):
            calls.append({"api_key": api_key, "timeout": timeout})
            self.messages = FakeMessages()

    monkeypatch.setitem(sys.modules, "anthropic", types.SimpleNamespace(Anthropic=FakeAnthropic))
    return calls


def test_call_anthropic_sends_single_user_message(monkeypatch):
    calls = _fake_anthropic(monkeypatch, [types.SimpleNamespace(text="---\ntitle: x\n---\n# X\n")])

    text = adapters.call_anthropic("the prompt", "claude-test", 4000, None, 30, api_key="sk-test")

    assert text == "---\ntitle: x\n---\n# X\n"
    assert calls[0] == {"api_key": "sk-test", "timeout": 30}
    assert calls[1] == {
        "model": "claude-test",
        "max_tokens": 4000,
        "messages": [{"role": "user", "content": "the prompt"}],
    }


def test_call_anthropic_without_content_returns_empty(monkeypatch):
    _fake_anthropic(monkeypatch, [])
    assert adapters.call_anthropic("p", "m", 10, 0.2, 30, api_key="k") == ""


def test_call_anthropic_requires_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(GenerationError, match="ANTHROPIC_API_KEY"):
        adapters.call_anthropic("p", "m", 10, None, 30)


def test_unknown_provider_rejected():
    with pytest.raises(GenerationError, match="Unknown aiProvider"):
        adapters.call_with_options("mystery", "p", "m")


class TestProviderGenerator:

    def _settings(self, **kw):
        data = {"apiSpec": "x", "aiModel": "m"}
        data.update(kw)
        return GlobalSettings.model_validate(data)

    def test_generate_passes_settings(self, monkeypatch):
        seen = {}

        def fake_call(provider, prompt, model, max_tokens, temperature, timeout, api_key):
            seen.update(provider=provider, prompt=prompt, model=model, max_tokens=max_tokens,
                        temperature=temperature, timeout=timeout, api_key=api_key)
            return "content"

        monkeypatch.setattr(adapters, "call_with_options", fake_call)
        gen = adapters.ProviderGenerator(self._settings(maxTokens=123, temperature=0.1), api_key="k")

        assert gen.generate("prompt", "model-x") == "content"
        assert seen == {
            "provider": "anthropic",
            "prompt": "prompt",
            "model": "model-x",
            "max_tokens": 123,
            "temperature": 0.1,
            "timeout": 600,
            "api_key": "k",
        }

    def test_sdk_failure_becomes_generation_error_with_redacted_key(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-supersecretvalue")

        def boom(*args, **kwargs):
            raise RuntimeError("401 for key sk-ant-supersecretvalue")

        monkeypatch.setattr(adapters, "call_with_options", boom)
        gen = adapters.ProviderGenerator(self._settings())

        with pytest.raises(GenerationError) as exc_info:
            gen.generate("p", "m")
        assert "supersecret" not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_empty_text_is_generation_error(self, monkeypatch):
        monkeypatch.setattr(adapters, "call_with_options", lambda *a, **k: "   \n")
        with pytest.raises(GenerationError, match="returned no text"):
            adapters.ProviderGenerator(self._settings()).generate("p", "m")
