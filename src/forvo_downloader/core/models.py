"""
Data types for Forvo lookups and download outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class Item:
    """A single pronunciation returned by a lookup."""

    id: int
    word: str
    pathmp3: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        return cls(
            id=int(data.get('id', 0)),
            word=str(data.get('word', "")),
            pathmp3=str(data.get('pathmp3', "")),
        )


@dataclass(frozen=True)
class LookupResult:
    """Decoded body of a word-pronunciations lookup.

    Items arrive in the order the API returned them; with the rate-desc
    ordering the first one is the highest rated.
    """

    total: int = 0
    items: List[Item] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "LookupResult":
        """
        Build a lookup result from decoded JSON.

        Raises:
            ValueError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("lookup response is not a JSON object")

        attributes = data.get('attributes') or {}
        items = data.get('items') or []
        if not isinstance(attributes, dict) or not isinstance(items, list):
            raise ValueError("lookup response has unexpected attributes or items")

        try:
            return cls(
                total=int(attributes.get('total', 0)),
                items=[Item.from_dict(item) for item in items],
            )
        except (TypeError, AttributeError, OverflowError) as e:
            raise ValueError(f"lookup response has malformed items: {e}") from e


class DownloadState(Enum):
    """Final state of processing one word."""

    SKIPPED = "skipped"
    SEARCH_FAILED = "search_failed"
    SEARCH_QUOTA_EXCEEDED = "search_quota_exceeded"
    SEARCH_MALFORMED = "search_malformed"
    SEARCH_EMPTY = "search_empty"
    FETCH_FAILED = "fetch_failed"
    FETCH_QUOTA_EXCEEDED = "fetch_quota_exceeded"
    OPEN_FAILED = "open_failed"
    WRITTEN = "written"
    WRITE_FAILED = "write_failed"

    @property
    def fatal(self) -> bool:
        """Whether reaching this state stops the whole run."""
        return self in _FATAL_STATES


_FATAL_STATES = frozenset({
    DownloadState.SEARCH_QUOTA_EXCEEDED,
    DownloadState.SEARCH_MALFORMED,
    DownloadState.FETCH_QUOTA_EXCEEDED,
    DownloadState.OPEN_FAILED,
})
