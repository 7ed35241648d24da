"""
Page representations consumed by the extraction strategies.

Two variants exist: ``HtmlPage`` wraps HTML fetched through a relay and
``LiveDomPage`` wraps a snapshot of a page already rendered in a browser,
including the framework-internal properties read off its anchor elements.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Mapping, Optional, Tuple

from selectolax.lexbor import LexborHTMLParser, LexborNode

# Anchor names in the order the live collector reads them
ANCHOR_BOARD_HEADER = "board-header"
ANCHOR_BOARD_TITLE = "board-title"
ANCHOR_ROOT_CHILD = "root-first-child"
ANCHOR_BODY = "body"

ANCHOR_PRIORITY: Tuple[str, ...] = (ANCHOR_BOARD_HEADER, ANCHOR_BOARD_TITLE, ANCHOR_ROOT_CHILD, ANCHOR_BODY)


@dataclass(frozen=True)
class PageSnapshot:
    """Read-only page input shared by both variants."""

    url: str
    html: str

    is_live = False

    @cached_property
    def tree(self) -> LexborHTMLParser:
        return LexborHTMLParser(self.html)

    def css_first(self, selector: str) -> Optional[LexborNode]:
        return self.tree.css_first(selector)

    def css(self, selector: str) -> list[LexborNode]:
        return self.tree.css(selector)

    def meta_content(self, prop: str) -> Optional[str]:
        """Content of ``<meta property=prop>`` (or ``name=prop``), if present and non-empty."""
        node = self.css_first(f'meta[property="{prop}"]')
        if node is None:
            node = self.css_first(f'meta[name="{prop}"]')
        if node is None:
            return None
        content = node.attributes.get("content")
        return content or None


@dataclass(frozen=True)
class HtmlPage(PageSnapshot):
    """HTML text fetched from a remote source."""


@dataclass(frozen=True)
class LiveDomPage(PageSnapshot):
    """Snapshot of a rendered page taken from inside a browser."""

    # (anchor name, own framework-internal keys of that element) in priority order
    framework_props: Tuple[Tuple[str, Mapping[str, Any]], ...] = field(default_factory=tuple)

    is_live = True
