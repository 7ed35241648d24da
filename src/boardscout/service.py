"""
Fetched-HTML flow: from a board URL typed by a user to an extraction outcome.
"""

from __future__ import annotations

from typing import Optional

import structlog
from structlog.contextvars import bound_contextvars

from .config.config import Config, ExtractionSettings
from .errors import InputValidationError
from .extractor import BoardIdExtractor, ExtractionOutcome, HtmlPage
from .transport import RelayTransport

logger = structlog.get_logger(__name__)


def validate_board_url(url: Optional[str], settings: Optional[ExtractionSettings] = None) -> str:
    """Reject anything that isn't a URL on the board service, before any I/O."""
    settings = settings or ExtractionSettings()
    if not url or not isinstance(url, str):
        raise InputValidationError()
    url = url.strip()
    if settings.domain_marker not in url:
        raise InputValidationError()
    return url


def canonicalize_url(url: str) -> str:
    """
    Drop the query string, fragment and trailing slashes.

    Idempotent: ``canonicalize_url(canonicalize_url(u)) == canonicalize_url(u)``.
    """
    url = url.split("#", 1)[0].split("?", 1)[0]
    return url.rstrip("/")


async def find_board_id(
    url: str,
    *,
    config: Optional[Config] = None,
    transport: Optional[RelayTransport] = None,
    extractor: Optional[BoardIdExtractor] = None,
) -> ExtractionOutcome:
    """
    Fetch a board page through the relays and locate its ID.

    Args:
        url: Board URL as entered by the user
        config: Configuration; defaults are used when omitted
        transport: Transport to reuse; a temporary one is opened otherwise
        extractor: Extractor to reuse

    Returns:
        ExtractionSuccess or ExtractionFailure

    Raises:
        InputValidationError: the URL is not a board URL
        TransportExhaustedError: no relay returned the page
    """
    config = config or Config()
    url = validate_board_url(url, config.extraction)
    clean_url = canonicalize_url(url)
    extractor = extractor or BoardIdExtractor(config.extraction)

    with bound_contextvars(request_url=clean_url):
        if transport is None:
            async with RelayTransport(config.transport) as owned_transport:
                html = await owned_transport.fetch(clean_url)
        else:
            html = await transport.fetch(clean_url)

        logger.debug("Page fetched", length=len(html))
        return extractor.extract(HtmlPage(url=clean_url, html=html))
