"""
Live-DOM variant: runs the strategy chain against a page open in a browser.
"""

from .bridge import EXTRACT_ACTION, handle_message
from .collector import ANCHOR_SELECTORS, collect_framework_props, collect_snapshot

__all__ = ["ANCHOR_SELECTORS", "EXTRACT_ACTION", "collect_framework_props", "collect_snapshot", "handle_message"]
