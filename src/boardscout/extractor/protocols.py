"""
Protocol for pluggable board-ID strategies.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .page import PageSnapshot


@runtime_checkable
class Strategy(Protocol):
    """One heuristic that looks for the board ID in a single page representation."""

    name: str

    def supports(self, page: PageSnapshot) -> bool:
        """Whether this strategy can run against the given page variant."""
        ...

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        """Return a validated board ID, or None.

        Args:
            page: Page to inspect; never mutated
            min_length: Minimum digit count a candidate needs to be accepted

        Returns:
            The board ID, or None when this representation carries no usable ID
        """
        ...
