"""Data models for the short URL service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShortLink:
    """A stored mapping from a short identifier to its original URL."""

    id: int
    original_url: str

    def to_dict(self) -> dict:
        """Convert to the wire representation returned by the API."""
        return {
            "original_url": self.original_url,
            "short_url": self.id,
        }
