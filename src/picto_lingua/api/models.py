"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from picto_lingua.domain.sessions import ProgressItem, ProgressStatus


class ProgressItemPayload(BaseModel):
    """Progress reported by the client for one word."""

    word: str | None = None
    status: ProgressStatus
    time_taken_ms: int | None = Field(default=None, ge=0)
    seen_count: int = Field(default=0, ge=0)
    known_count: int = Field(default=0, ge=0)

    def to_domain(self, word: str) -> ProgressItem:
        """Convert to a domain item, defaulting the word to its map key."""
        return ProgressItem(
            word=self.word or word,
            status=self.status,
            seen_count=self.seen_count,
            known_count=self.known_count,
            time_taken_ms=self.time_taken_ms,
        )


class SaveSessionRequest(BaseModel):
    """Create or update a learning session."""

    theme_id: str = Field(min_length=1)
    image_id: str = Field(min_length=1)
    progress: dict[str, ProgressItemPayload] = Field(default_factory=dict)
    session_id: str | None = None

    def progress_items(self) -> dict[str, ProgressItem]:
        """Return the reported progress as domain items."""
        return {word: item.to_domain(word) for word, item in self.progress.items()}
