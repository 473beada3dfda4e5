"""Learning session API endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Query, Request, status

from picto_lingua.api.models import SaveSessionRequest
from picto_lingua.services.sessions import SessionNotFoundError
from picto_lingua.services.vocabulary import DataUnavailableError, UpstreamFailureError

if TYPE_CHECKING:
    from picto_lingua.containers import AppContainer
    from picto_lingua.domain.sessions import ProgressItem, SessionRecord

IMAGE_COUNT = 5
MIN_VOCABULARY_COUNT = 1
MAX_VOCABULARY_COUNT = 20

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _require_theme(container: AppContainer, theme_id: str) -> None:
    if not container.theme_catalog.is_valid(theme_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="invalid theme"
        )


@router.get("/themes")
async def list_themes(request: Request) -> dict[str, object]:
    """Return all available themes."""
    themes = _container(request).theme_catalog.list_themes()
    return {"themes": [asdict(theme) for theme in themes]}


@router.get("/images")
async def get_images(
    request: Request, theme: str = Query(min_length=1)
) -> dict[str, object]:
    """Return images for a theme."""
    container = _container(request)
    _require_theme(container, theme)
    try:
        images = await container.image_client.search_images(theme, IMAGE_COUNT)
    except httpx.HTTPError as exc:
        logger.warning("Error getting images for %s: %s", theme, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to get images",
        ) from exc
    return {"theme": theme, "images": [asdict(image) for image in images]}


@router.get("/images/random")
async def get_random_image(
    request: Request, theme: str = Query(min_length=1)
) -> dict[str, object]:
    """Return one random image for a theme."""
    container = _container(request)
    _require_theme(container, theme)
    try:
        image = await container.image_client.random_image(theme)
    except httpx.HTTPError as exc:
        logger.warning("Error getting random image for %s: %s", theme, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to get image",
        ) from exc
    return {"theme": theme, "image": asdict(image)}


@router.get("/vocabulary")
async def get_vocabulary(
    request: Request,
    theme: str = Query(min_length=1),
    count: str = "10",
    language: str = "english",
) -> dict[str, object]:
    """Return vocabulary for a theme, served from the cache when possible."""
    container = _container(request)
    _require_theme(container, theme)
    requested = _parse_count(count)
    try:
        vocabulary = await container.vocabulary_cache.get_or_generate(
            theme, requested, language
        )
    except DataUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except UpstreamFailureError as exc:
        logger.warning("Error getting vocabulary: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="failed to get vocabulary",
        ) from exc
    return {
        "theme": theme,
        "count": len(vocabulary),
        "language": language,
        "vocabulary": [item.model_dump(exclude_none=True) for item in vocabulary],
    }


@router.post("/session")
async def save_session(
    payload: SaveSessionRequest, request: Request
) -> dict[str, str]:
    """Create a session, or merge progress into an existing one."""
    container = _container(request)
    _require_theme(container, payload.theme_id)
    store = container.session_store
    progress = payload.progress_items()
    if not payload.session_id:
        session_id = store.create(payload.theme_id, payload.image_id)
        if progress:
            store.update(session_id, progress)
        return {"session_id": session_id, "status": "success"}

    try:
        store.update(payload.session_id, progress)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="session not found"
        ) from exc
    return {"session_id": payload.session_id, "status": "success"}


@router.get("/session")
async def get_session(
    request: Request, session_id: str = Query(min_length=1)
) -> dict[str, object]:
    """Return a session with its progress."""
    try:
        session = _container(request).session_store.get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="session not found"
        ) from exc
    return _session_payload(session)


def _session_payload(session: SessionRecord) -> dict[str, object]:
    return {
        "session_id": session.session_id,
        "theme_id": session.theme_id,
        "image_id": session.image_id,
        "progress": {
            word: _progress_payload(item) for word, item in session.progress.items()
        },
        "started_at": session.started_at.isoformat(),
        "last_updated": session.last_updated.isoformat(),
    }


def _progress_payload(item: ProgressItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "word": item.word,
        "status": item.status.value,
        "seen_count": item.seen_count,
        "known_count": item.known_count,
    }
    if item.time_taken_ms is not None:
        payload["time_taken_ms"] = item.time_taken_ms
    return payload


def _parse_count(raw: str) -> int:
    """Parse and clamp the requested vocabulary count."""
    try:
        count = int(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid count parameter",
        ) from exc
    return min(max(count, MIN_VOCABULARY_COUNT), MAX_VOCABULARY_COUNT)
