"""
Errors that cross the extraction boundary.

Strategy-internal failures never surface here; they are absorbed inside the
orchestrator and logged at debug level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from boardscout.extractor.metadata import PageMetadata


class BoardScoutError(Exception):
    """Base class for every error surfaced to callers."""

    pass


class InputValidationError(BoardScoutError, ValueError):
    """Raised when the input URL is not a board URL. No I/O has happened yet."""

    default_message = "Please enter a valid Pinterest board URL."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class TransportExhaustedError(BoardScoutError):
    """Raised when every relay failed or returned an undersized page."""

    default_message = "Connection failed. Could not reach the page, try again in a few seconds."

    def __init__(self, message: Optional[str] = None, *, attempts: int = 0) -> None:
        super().__init__(message or self.default_message)
        self.attempts = attempts


class NoIdentifierFoundError(BoardScoutError):
    """Raised when no strategy produced a valid board ID."""

    default_message = (
        "Could not locate the board ID. The board may be private, removed, or the page structure changed."
    )

    def __init__(self, message: Optional[str] = None, *, metadata: Optional[PageMetadata] = None) -> None:
        super().__init__(message or self.default_message)
        self.metadata = metadata
