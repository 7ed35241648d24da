"""
Request/response bridge between a UI surface and the live-page executor.

Exactly one response is produced per request, including on internal failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import structlog

from ..errors import InputValidationError
from ..extractor import BoardIdExtractor
from .collector import collect_snapshot

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = structlog.get_logger(__name__)

EXTRACT_ACTION = "EXTRACT_BOARD_ID"

NOT_A_BOARD_PAGE = "Please open a Pinterest board to use this tool."
NOT_FOUND_ON_PAGE = "Could not find the ID. Make sure you are on the main page of a board."
EXECUTOR_FAILED = "Extraction failed inside the page. Try reloading the board page."


def _error_response(error: str, url: Optional[str] = None) -> Dict[str, Any]:
    return {
        "success": False,
        "id": None,
        "method": None,
        "error": error,
        "meta": {"url": url, "title": None, "image": None},
    }


async def handle_message(
    request: Mapping[str, Any],
    page: Page,
    extractor: Optional[BoardIdExtractor] = None,
) -> Dict[str, Any]:
    """
    Answer one ``{"action": "EXTRACT_BOARD_ID"}`` request against a live page.

    Returns:
        ``{success, id, method, error, meta}`` as plain data
    """
    action = request.get("action") if isinstance(request, Mapping) else None
    if action != EXTRACT_ACTION:
        logger.debug("Ignoring unknown action", action=action)
        return _error_response(f"Unsupported action: {action!r}")

    extractor = extractor or BoardIdExtractor()
    url = getattr(page, "url", None)
    try:
        if not url or extractor.settings.domain_marker not in url:
            raise InputValidationError(NOT_A_BOARD_PAGE)
        snapshot = await collect_snapshot(page)
        outcome = extractor.extract(snapshot)
    except InputValidationError as e:
        return _error_response(str(e), url)
    except Exception as e:
        logger.error("Live extraction failed", url=url, error=str(e), error_type=type(e).__name__)
        return _error_response(EXECUTOR_FAILED, url)

    response = outcome.to_message()
    if not outcome.success:
        response["error"] = NOT_FOUND_ON_PAGE
    return response

