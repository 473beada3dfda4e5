"""Domain models for learning sessions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ProgressStatus(str, Enum):
    """Learning status reported for a single word."""

    KNOWN = "known"
    LEARNING = "learning"
    DIFFICULT = "difficult"


@dataclass(frozen=True)
class ProgressItem:
    """Per-word learning progress within a session."""

    word: str
    status: ProgressStatus
    seen_count: int = 0
    known_count: int = 0
    time_taken_ms: int | None = None


@dataclass(frozen=True)
class SessionRecord:
    """Snapshot of a learning session."""

    session_id: str
    theme_id: str
    image_id: str
    progress: dict[str, ProgressItem]
    started_at: datetime
    last_updated: datetime
