"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from picto_lingua.adapters.static_vocabulary_provider import StaticVocabularyProvider
from picto_lingua.adapters.unsplash_client import ImageClient
from picto_lingua.config import Settings
from picto_lingua.containers import AppContainer
from picto_lingua.domain.images import Image
from picto_lingua.domain.vocabulary import VocabularyItem
from picto_lingua.services.sessions import SessionStore
from picto_lingua.services.themes import ThemeCatalog
from picto_lingua.services.vocabulary import (
    UpstreamFailureError,
    VocabularyCache,
    VocabularyProvider,
)


def make_image(image_id: str = "img1") -> Image:
    return Image(
        id=image_id,
        url="https://images.test/photo?ixid=1&w=800&h=600&fit=crop&crop=entropy",
        download_url="https://images.test/download",
        description="A cosy cafe",
        width=4000,
        height=3000,
        created_at="2024-01-01T00:00:00Z",
        photographer="Ada",
        photographer_url="https://unsplash.test/@ada",
        unsplash_url="https://unsplash.test/photos/img1",
        attribution_string="Photo by Ada on Unsplash",
    )


@dataclass
class FakeImageClient(ImageClient):
    """Fake image client returning static images."""

    queries: list[str] = field(default_factory=list)

    async def search_images(self, query: str, count: int) -> list[Image]:
        self.queries.append(query)
        return [make_image(f"img{index}") for index in range(1, count + 1)]

    async def random_image(self, query: str) -> Image:
        self.queries.append(query)
        return make_image()


@dataclass
class CountingVocabularyProvider(VocabularyProvider):
    """Provider that records calls and returns one item per requested count."""

    calls: list[tuple[str, int, str]] = field(default_factory=list)
    delay_seconds: float = 0.0

    async def generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        self.calls.append((theme, count, language))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        return [
            VocabularyItem(
                word=f"{theme}-{language}-{index}",
                definition=f"definition {index}",
            )
            for index in range(count)
        ]


@dataclass
class FlakyVocabularyProvider(VocabularyProvider):
    """Provider that fails a fixed number of times before succeeding."""

    failures: int = 1
    calls: int = 0
    delay_seconds: float = 0.0

    async def generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        self.calls += 1
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.calls <= self.failures:
            raise UpstreamFailureError("timeout")
        return [VocabularyItem(word="coffee", definition="A hot drink")]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        unsplash_access_key="unsplash-key",
        openai_api_key=None,
        cors_origins="http://localhost:3000",
    )


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def container(
    settings: Settings, image_client: FakeImageClient, session_store: SessionStore
) -> AppContainer:
    provider = StaticVocabularyProvider()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        theme_catalog=ThemeCatalog(),
        image_client=image_client,
        vocabulary_provider=provider,
        vocabulary_cache=VocabularyCache(provider),
        session_store=session_store,
        close_resources=close_resources,
    )
