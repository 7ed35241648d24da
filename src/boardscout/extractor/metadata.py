"""
Best-effort page metadata (title and thumbnail) read independently of the ID strategies.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import structlog

from .page import PageSnapshot

logger = structlog.get_logger(__name__)

SITE_TITLE_SUFFIX = " | Pinterest"


@dataclass(slots=True, frozen=True)
class PageMetadata:
    """Metadata scraped from the page's OpenGraph tags."""

    url: str
    title: Optional[str] = None
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _clean_title(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    title = title.replace(SITE_TITLE_SUFFIX, "").strip()
    return title or None


def read_metadata(page: PageSnapshot) -> PageMetadata:
    """Read og:title / og:image, falling back to ``<title>``. Never raises."""
    title: Optional[str] = None
    image: Optional[str] = None

    try:
        title = _clean_title(page.meta_content("og:title"))
        if title is None:
            title_node = page.css_first("title")
            if title_node is not None:
                title = _clean_title(title_node.text(strip=True))
        image = page.meta_content("og:image")
    except Exception as e:
        logger.debug("Metadata extraction failed", url=page.url, error=str(e))

    return PageMetadata(url=page.url, title=title, image=image)
