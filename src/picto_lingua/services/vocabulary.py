"""Vocabulary provider contract and response cache."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Protocol

from picto_lingua.domain.vocabulary import VocabularyItem

_logger = logging.getLogger(__name__)


class VocabularyError(RuntimeError):
    """Base error for vocabulary providers."""


class DataUnavailableError(VocabularyError):
    """Raised when no offline dataset exists for a theme."""

    def __init__(self, theme: str) -> None:
        super().__init__(f"Vocabulary data not available for theme: {theme}")
        self.theme = theme


class UpstreamFailureError(VocabularyError):
    """Raised when a live generation call fails or returns unusable content."""


class VocabularyProvider(Protocol):
    """Interface for producing vocabulary items for a theme."""

    async def generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        """Return up to ``count`` vocabulary items for the theme."""


class VocabularyKey(NamedTuple):
    """Cache key for a vocabulary request."""

    theme: str
    count: int
    language: str


@dataclass
class VocabularyCache:
    """Write-once memoization of vocabulary provider results.

    Entries are never evicted. Concurrent misses on the same key wait on a
    per-key lock so that only the first caller reaches the provider.
    """

    provider: VocabularyProvider
    _entries: dict[VocabularyKey, tuple[VocabularyItem, ...]] = field(
        default_factory=dict, init=False
    )
    _locks: dict[VocabularyKey, asyncio.Lock] = field(
        default_factory=dict, init=False
    )

    async def get_or_generate(
        self, theme: str, count: int, language: str
    ) -> list[VocabularyItem]:
        """Return cached vocabulary, generating it on a miss."""
        key = VocabularyKey(theme=theme, count=count, language=language.lower())
        cached = self._entries.get(key)
        if cached is not None:
            _logger.debug("Vocabulary cache hit: %s", key)
            return list(cached)

        lock = self._locks.setdefault(key, asyncio.Lock())
        try:
            async with lock:
                cached = self._entries.get(key)
                if cached is not None:
                    _logger.debug("Vocabulary cache hit after wait: %s", key)
                    return list(cached)

                _logger.info("Vocabulary cache miss: %s", key)
                items = await self.provider.generate(
                    key.theme, key.count, key.language
                )
                stored = tuple(items)
                self._entries[key] = stored
        finally:
            # Locks bind to the loop they were contended on.
            if self._locks.get(key) is lock:
                del self._locks[key]
        _logger.info("Vocabulary cached: %s items=%s", key, len(stored))
        return list(stored)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
