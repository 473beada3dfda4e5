"""Image domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Image:
    """Image metadata with photographer attribution."""

    id: str
    url: str
    download_url: str
    description: str | None
    width: int
    height: int
    created_at: str
    photographer: str
    photographer_url: str
    unsplash_url: str
    attribution_string: str
