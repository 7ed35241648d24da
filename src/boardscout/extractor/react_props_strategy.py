"""
Framework-internal props strategy (live pages only).

React attaches each element's current props under an own key named
``__reactProps$<random suffix>``. The live collector copies those keys for a
handful of anchor elements; this strategy searches them for ``board_id``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .deep_search import find_key
from .page import PageSnapshot
from .validator import is_valid_identifier

REACT_PROPS_PREFIX = "__reactProps$"


def find_props_key(element_keys: Mapping[str, Any]) -> Optional[str]:
    return next((key for key in element_keys if key.startswith(REACT_PROPS_PREFIX)), None)


class ReactPropsStrategy:
    """Stops at the first anchor whose props yield a valid ID; anchors are never combined."""

    name = "ReactFiber"

    def supports(self, page: PageSnapshot) -> bool:
        return page.is_live

    def attempt(self, page: PageSnapshot, *, min_length: int) -> Optional[str]:
        for _anchor, element_keys in getattr(page, "framework_props", ()):
            props_key = find_props_key(element_keys)
            if props_key is None:
                continue
            candidate = find_key(element_keys[props_key], "board_id")
            if is_valid_identifier(candidate, min_length):
                return candidate
        return None
