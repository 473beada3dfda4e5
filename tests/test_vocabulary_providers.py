"""Tests for the offline and OpenAI vocabulary providers."""

import asyncio
import json

import pytest
from openai import OpenAIError

from picto_lingua.adapters.openai_vocabulary_provider import (
    OpenAIVocabularyProvider,
    build_prompt,
    strip_code_fences,
)
from picto_lingua.adapters.static_vocabulary_provider import StaticVocabularyProvider
from picto_lingua.services.vocabulary import DataUnavailableError, UpstreamFailureError


class _FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        if self.error is not None:
            raise self.error
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Resp", (), {"choices": [choice]})()


class _FakeOpenAI:
    def __init__(self, completions: _FakeCompletions) -> None:
        self.chat = type("Chat", (), {"completions": completions})()


def _provider(completions: _FakeCompletions) -> OpenAIVocabularyProvider:
    return OpenAIVocabularyProvider(client=_FakeOpenAI(completions))


def test_static_provider_truncates_to_count() -> None:
    provider = StaticVocabularyProvider()

    items = asyncio.run(provider.generate("cafe", 3, "english"))

    assert [item.word for item in items] == ["coffee", "barista", "menu"]


def test_static_provider_returns_all_items_when_count_exceeds_dataset() -> None:
    provider = StaticVocabularyProvider()

    items = asyncio.run(provider.generate("cafe", 20, "english"))

    assert len(items) == 10


def test_static_provider_uses_dutch_dataset() -> None:
    provider = StaticVocabularyProvider()

    items = asyncio.run(provider.generate("park", 10, "Dutch"))

    assert len(items) == 5
    assert items[0].dutch_word == "bank"


def test_static_provider_falls_back_to_english_without_translation() -> None:
    provider = StaticVocabularyProvider(translated_datasets={"dutch": {}})

    items = asyncio.run(provider.generate("park", 2, "dutch"))

    assert items[0].word == "bench"
    assert items[0].dutch_word is None


def test_static_provider_unknown_theme_is_unavailable() -> None:
    provider = StaticVocabularyProvider()

    with pytest.raises(DataUnavailableError):
        asyncio.run(provider.generate("beach", 5, "english"))


def test_openai_provider_parses_fenced_json() -> None:
    payload = [
        {"word": "bench", "definition": "A seat", "example": "Sit on the bench."},
        {"word": "tree", "definition": "A tall plant"},
    ]
    completions = _FakeCompletions(content=f"```json\n{json.dumps(payload)}\n```")
    provider = _provider(completions)

    items = asyncio.run(provider.generate("park", 2, "english"))

    assert [item.word for item in items] == ["bench", "tree"]
    assert items[1].example is None
    assert completions.last_payload is not None
    assert completions.last_payload["model"] == "gpt-3.5-turbo"
    assert completions.last_payload["temperature"] == 0.7
    messages = completions.last_payload["messages"]
    assert messages[0]["role"] == "system"
    assert '"park"' in messages[1]["content"]


def test_openai_provider_rejects_unparseable_content() -> None:
    provider = _provider(_FakeCompletions(content="Here are some words: bench"))

    with pytest.raises(UpstreamFailureError):
        asyncio.run(provider.generate("park", 2, "english"))


def test_openai_provider_rejects_items_missing_fields() -> None:
    provider = _provider(_FakeCompletions(content=json.dumps([{"word": "bench"}])))

    with pytest.raises(UpstreamFailureError):
        asyncio.run(provider.generate("park", 1, "english"))


def test_openai_provider_rejects_empty_response() -> None:
    provider = _provider(_FakeCompletions(content=""))

    with pytest.raises(UpstreamFailureError):
        asyncio.run(provider.generate("park", 1, "english"))


def test_openai_provider_wraps_client_errors() -> None:
    provider = _provider(_FakeCompletions(error=OpenAIError("rate limited")))

    with pytest.raises(UpstreamFailureError) as excinfo:
        asyncio.run(provider.generate("park", 1, "english"))

    assert isinstance(excinfo.value.__cause__, OpenAIError)


def test_dutch_prompt_requests_translations() -> None:
    prompt = build_prompt("cafe", 4, "dutch")

    assert "Generate 4 vocabulary words" in prompt
    assert '"dutch_word"' in prompt
    assert "dutch_word" not in build_prompt("cafe", 4, "english")


def test_strip_code_fences_leaves_plain_json() -> None:
    assert strip_code_fences(' [{"word": "a"}] ') == '[{"word": "a"}]'
    assert strip_code_fences("```\n[]\n```") == "[]"
