"""
Regex scavenging over the raw page text (fetched HTML only).

The narrow patterns target key/value idioms known to carry the board ID. The
broad pattern is a separate, later strategy because its wide window can pick
up unrelated numbers.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Tuple

from .page import PageSnapshot
from .validator import is_valid_identifier

NARROW_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\"board_id\":\s*[\"']?(\d+)[\"']?", re.IGNORECASE),
    # nested "board": { ..., "id": ... } without crossing into another object
    re.compile(r"\"board\":\s*\{\s*[^{}]*\"id\":\s*[\"']?(\d+)[\"']?", re.IGNORECASE),
    re.compile(r"data-board-id=[\"'](\d+)[\"']", re.IGNORECASE),
    re.compile(r"\"element_id\":\s*[\"']?(\d+)[\"']?", re.IGNORECASE),
    re.compile(r"\"objectId\":\s*[\"']?(\d+)[\"']?", re.IGNORECASE),
)

# 10-25 digits within 400 characters after a board type marker; survives minification
BROAD_PATTERN: Pattern[str] = re.compile(
    r"\"(?:type|category)\":\s*\"board\".{1,400}?\"id\":\s*[\"']?(\d{10,25})[\"']?",
    re.IGNORECASE | re.DOTALL,
)


class RegexStrategy:
    """Tries each narrow pattern in order; the first match that validates wins."""

    name = "Regex"

    def supports(self, page: PageSnapshot) -> bool:
        return not page.is_live

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        for pattern in NARROW_PATTERNS:
            match = pattern.search(page.html)
            if match and is_valid_identifier(match.group(1), min_length):
                return match.group(1)
        return None


class BroadRegexStrategy:
    """Last-resort pattern, only reached after every narrow pattern missed."""

    name = "RegexBroad"

    def supports(self, page: PageSnapshot) -> bool:
        return not page.is_live

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        match = BROAD_PATTERN.search(page.html)
        if match and is_valid_identifier(match.group(1), min_length):
            return match.group(1)
        return None
