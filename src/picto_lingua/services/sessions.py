"""In-memory registry of learning sessions."""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import uuid4

from picto_lingua.domain.sessions import ProgressItem, SessionRecord

_logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a session id has no matching record."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _new_session_id() -> str:
    return str(uuid4())


@dataclass
class SessionStore:
    """Thread-safe store of session snapshots.

    Writers serialize on a lock and publish a fresh frozen ``SessionRecord``
    for every change. Readers look up the current snapshot without locking,
    so they never see a half-applied progress update.
    """

    clock: Callable[[], datetime] = _utc_now
    id_factory: Callable[[], str] = _new_session_id
    _sessions: dict[str, SessionRecord] = field(default_factory=dict, init=False)
    _write_lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def create(self, theme_id: str, image_id: str) -> str:
        """Create an empty session and return its id."""
        now = self.clock()
        with self._write_lock:
            session_id = self.id_factory()
            while session_id in self._sessions:
                session_id = self.id_factory()
            self._sessions[session_id] = SessionRecord(
                session_id=session_id,
                theme_id=theme_id,
                image_id=image_id,
                progress={},
                started_at=now,
                last_updated=now,
            )
        _logger.info("Session created: id=%s theme=%s", session_id, theme_id)
        return session_id

    def get(self, session_id: str) -> SessionRecord:
        """Return a snapshot of the session."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return replace(session, progress=dict(session.progress))

    def update(
        self, session_id: str, progress: Mapping[str, ProgressItem]
    ) -> SessionRecord:
        """Merge per-word progress into the session.

        Each word in ``progress`` replaces the stored entry for that word.
        """
        with self._write_lock:
            current = self._sessions.get(session_id)
            if current is None:
                raise SessionNotFoundError(session_id)
            merged = dict(current.progress)
            merged.update(progress)
            updated = replace(
                current,
                progress=merged,
                last_updated=max(self.clock(), current.last_updated),
            )
            self._sessions[session_id] = updated
        _logger.debug(
            "Session updated: id=%s words=%s total=%s",
            session_id,
            len(progress),
            len(merged),
        )
        return replace(updated, progress=dict(merged))

    def __len__(self) -> int:
        return len(self._sessions)
