"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from picto_lingua.adapters.openai_vocabulary_provider import OpenAIVocabularyProvider
from picto_lingua.adapters.static_vocabulary_provider import StaticVocabularyProvider
from picto_lingua.adapters.unsplash_client import HttpxUnsplashClient, ImageClient
from picto_lingua.config import Settings
from picto_lingua.services.sessions import SessionStore
from picto_lingua.services.themes import ThemeCatalog
from picto_lingua.services.vocabulary import VocabularyCache, VocabularyProvider

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    theme_catalog: ThemeCatalog
    image_client: ImageClient
    vocabulary_provider: VocabularyProvider
    vocabulary_cache: VocabularyCache
    session_store: SessionStore
    close_resources: Callable[[], Awaitable[None]]


def build_vocabulary_provider(settings: Settings) -> VocabularyProvider:
    """Pick the offline or live vocabulary provider from settings."""
    if settings.use_mock_vocabulary:
        _logger.warning("No OpenAI API key configured, using offline vocabulary")
        return StaticVocabularyProvider()
    return OpenAIVocabularyProvider.create(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.openai_timeout_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    image_client = HttpxUnsplashClient.create(resolved_settings.unsplash_access_key)
    vocabulary_provider = build_vocabulary_provider(resolved_settings)

    async def close_resources() -> None:
        await image_client.close()
        if isinstance(vocabulary_provider, OpenAIVocabularyProvider):
            await vocabulary_provider.close()

    return AppContainer(
        settings=resolved_settings,
        theme_catalog=ThemeCatalog(),
        image_client=image_client,
        vocabulary_provider=vocabulary_provider,
        vocabulary_cache=VocabularyCache(vocabulary_provider),
        session_store=SessionStore(),
        close_resources=close_resources,
    )
