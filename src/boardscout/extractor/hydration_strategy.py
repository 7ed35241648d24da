"""
Hydration state strategy.

The server embeds the initial client state as JSON in ``<script id="__PWS_DATA__">``.
The board ID can sit at any depth (redux state, resources, props), so the
payload is parsed once and searched rather than pattern-matched.
"""

from __future__ import annotations

import json
from typing import Optional, Sequence

import structlog

from .deep_search import find_key
from .page import PageSnapshot
from .validator import is_valid_identifier

logger = structlog.get_logger(__name__)

HYDRATION_SCRIPT_ID = "__PWS_DATA__"

# entity_id can also denote a user; it is only consulted after board_id misses
DEFAULT_HYDRATION_KEYS = ("board_id", "entity_id")


class HydrationStateStrategy:
    """Deep-searches the hydration payload for ``board_id``, then ``entity_id``."""

    name = "PWS_DATA"

    def __init__(self, keys: Sequence[str] = DEFAULT_HYDRATION_KEYS) -> None:
        self.keys = tuple(keys)

    def supports(self, page: PageSnapshot) -> bool:
        return True

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        script = page.css_first(f"script#{HYDRATION_SCRIPT_ID}")
        if script is None:
            return None

        try:
            state = json.loads(script.text() or "")
        except json.JSONDecodeError as e:
            logger.debug("Hydration payload is not valid JSON", url=page.url, error=str(e))
            return None

        for key in self.keys:
            candidate = find_key(state, key)
            if is_valid_identifier(candidate, min_length):
                return candidate
        return None
