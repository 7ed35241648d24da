"""
Data models for extraction outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NoReturn, Optional, Union

from ..errors import NoIdentifierFoundError
from .metadata import PageMetadata


@dataclass(slots=True, frozen=True)
class BoardResult:
    """A board whose numeric ID has been located."""

    id: str
    url: str
    name: Optional[str] = None
    thumbnail: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ExtractionSuccess:
    """A strategy produced a valid ID; ``method`` names the strategy, for diagnostics only."""

    board: BoardResult
    method: str
    metadata: PageMetadata

    success = True

    def to_message(self) -> Dict[str, Any]:
        """Plain-data shape exchanged with UI surfaces."""
        return {
            "success": True,
            "id": self.board.id,
            "method": self.method,
            "error": None,
            "meta": self.metadata.to_dict(),
        }


@dataclass(slots=True, frozen=True)
class ExtractionFailure:
    """No strategy produced a valid ID."""

    reason: str
    metadata: PageMetadata

    success = False

    def raise_error(self) -> NoReturn:
        raise NoIdentifierFoundError(self.reason, metadata=self.metadata)

    def to_message(self) -> Dict[str, Any]:
        return {
            "success": False,
            "id": None,
            "method": None,
            "error": self.reason,
            "meta": self.metadata.to_dict(),
        }


ExtractionOutcome = Union[ExtractionSuccess, ExtractionFailure]
