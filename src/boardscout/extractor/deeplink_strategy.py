"""
App-link metadata strategy.

Mobile deep-link meta tags encode the board as ``pinterest://board/<id>``,
which makes them the most reliable source when present.
"""

from __future__ import annotations

import re
from typing import Optional

from .page import PageSnapshot
from .validator import is_valid_identifier

APP_LINK_PROPERTIES = ("al:ios:url", "al:android:url")

_BOARD_SEGMENT = re.compile(r"board/(\d+)")
_APP_SCHEME = re.compile(r"pinterest://board/(\d+)", re.IGNORECASE)


class DeepLinkStrategy:
    """Reads the board ID from app-link meta tags or a raw deep-link URL in the page text."""

    name = "DeepLink"

    def supports(self, page: PageSnapshot) -> bool:
        return True

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        for prop in APP_LINK_PROPERTIES:
            content = page.meta_content(prop)
            if not content:
                continue
            match = _BOARD_SEGMENT.search(content)
            if match and is_valid_identifier(match.group(1), min_length):
                return match.group(1)

        match = _APP_SCHEME.search(page.html)
        if match and is_valid_identifier(match.group(1), min_length):
            return match.group(1)
        return None
