"""Theme domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """A named vocabulary domain."""

    id: str
    name: str
    description: str | None = None
