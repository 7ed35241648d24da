"""
Schema.org JSON-LD strategy.
"""

from __future__ import annotations

import json
from typing import Any, Iterator, Optional

import structlog

from .page import PageSnapshot
from .validator import as_candidate, is_valid_identifier

logger = structlog.get_logger(__name__)

COLLECTION_PAGE_TYPE = "CollectionPage"


def _iter_items(data: Any) -> Iterator[dict]:
    """Yield every JSON-LD object in a payload: the object itself, array members and @graph members."""
    if isinstance(data, list):
        for item in data:
            yield from _iter_items(item)
        return
    if not isinstance(data, dict):
        return
    yield data
    graph = data.get("@graph")
    if isinstance(graph, list):
        for item in graph:
            if isinstance(item, dict):
                yield item


class JsonLdStrategy:
    """Scans every ld+json script; each payload is parsed on its own so one bad payload can't hide the rest."""

    name = "JSON-LD"

    def supports(self, page: PageSnapshot) -> bool:
        return True

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        for script in page.css('script[type="application/ld+json"]'):
            payload = (script.text() or "").strip()
            if not payload:
                continue
            try:
                data = json.loads(payload)
            except json.JSONDecodeError as e:
                logger.debug("Invalid JSON-LD payload", url=page.url, error=str(e))
                continue

            for item in _iter_items(data):
                for candidate in self._candidates_from(item):
                    if is_valid_identifier(candidate, min_length):
                        return candidate
        return None

    @staticmethod
    def _candidates_from(item: dict) -> Iterator[Optional[str]]:
        """CollectionPage mainEntity identifier first, then the item's own identifier."""
        if item.get("@type") == COLLECTION_PAGE_TYPE:
            main_entity = item.get("mainEntity")
            if isinstance(main_entity, dict):
                yield as_candidate(main_entity.get("identifier"))
        yield as_candidate(item.get("identifier"))
