"""Unsplash photo search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from picto_lingua.domain.images import Image

UNSPLASH_BASE_URL = "https://api.unsplash.com"
_RESIZE_PARAMS = "&w=800&h=600&fit=crop&crop=entropy"


class ImageClient(Protocol):
    """Interface for image search."""

    async def search_images(self, query: str, count: int) -> list[Image]:
        """Search images matching a query."""

    async def random_image(self, query: str) -> Image:
        """Return a random image matching a query."""


@dataclass
class HttpxUnsplashClient(ImageClient):
    """HTTPX-backed Unsplash client."""

    access_key: str
    http_client: httpx.AsyncClient
    base_url: str = UNSPLASH_BASE_URL

    @classmethod
    def create(cls, access_key: str) -> "HttpxUnsplashClient":
        """Create an Unsplash client with a managed httpx session."""
        return cls(access_key=access_key, http_client=httpx.AsyncClient())

    async def search_images(self, query: str, count: int) -> list[Image]:
        """Search landscape photos by query."""
        response = await self.http_client.get(
            f"{self.base_url}/search/photos",
            params={"query": query, "per_page": count, "orientation": "landscape"},
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        return [_to_image(result) for result in response.json().get("results", [])]

    async def random_image(self, query: str) -> Image:
        """Fetch a random landscape photo for a query."""
        response = await self.http_client.get(
            f"{self.base_url}/photos/random",
            params={"query": query, "orientation": "landscape"},
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        return _to_image(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Client-ID {self.access_key}"}


def _to_image(payload: dict[str, object]) -> Image:
    """Map an Unsplash photo payload to an Image."""
    urls = payload.get("urls") or {}
    links = payload.get("links") or {}
    user = payload.get("user") or {}
    user_links = user.get("links") or {}
    photographer = user.get("name") or ""
    return Image(
        id=payload["id"],
        url=f"{urls.get('regular', '')}{_RESIZE_PARAMS}",
        download_url=links.get("download", ""),
        description=payload.get("description"),
        width=payload.get("width", 0),
        height=payload.get("height", 0),
        created_at=payload.get("created_at", ""),
        photographer=photographer,
        photographer_url=user_links.get("html", ""),
        unsplash_url=links.get("html", ""),
        attribution_string=f"Photo by {photographer} on Unsplash",
    )
