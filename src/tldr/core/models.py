"""Data models shared by the pipeline, commands and CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

UNKNOWN_TITLE = "UNKNOWN"
UNAVAILABLE_TITLE = "UNAVAILABLE"
INVALID_URL_SUMMARY = "Invalid URL - No summary could be generated."


@dataclass(frozen=True)
class ArticleSummary:
    """Result of summarizing one URL; never mutated after creation."""

    url: str
    title: str
    summary: str

    @classmethod
    def invalid_url(cls, url: str) -> "ArticleSummary":
        """Placeholder returned for URLs that fail validation."""
        return cls(url, UNKNOWN_TITLE, INVALID_URL_SUMMARY)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
