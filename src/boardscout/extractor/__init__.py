"""
Board-ID extraction core.

A fixed chain of independent strategies, each targeting a different
representation of the same ID, tried in order of confidence:

1. DeepLink: app-link meta tags / ``pinterest://board/<id>``
2. JSON-LD: schema.org CollectionPage structured data
3. PWS_DATA: deep search of the embedded hydration state
4. ReactFiber: framework-internal props of live anchor elements
5. Regex / RegexBroad: textual patterns over the raw HTML
"""

from .deep_search import find_key
from .deeplink_strategy import DeepLinkStrategy
from .hydration_strategy import HydrationStateStrategy
from .jsonld_strategy import JsonLdStrategy
from .manager import BoardIdExtractor, default_strategies, detect_login_wall
from .metadata import PageMetadata, read_metadata
from .models import BoardResult, ExtractionFailure, ExtractionOutcome, ExtractionSuccess
from .page import HtmlPage, LiveDomPage, PageSnapshot
from .protocols import Strategy
from .react_props_strategy import ReactPropsStrategy
from .regex_strategy import BroadRegexStrategy, RegexStrategy
from .validator import DEFAULT_MIN_ID_LENGTH, as_candidate, is_valid_identifier

__all__ = [
    "BoardIdExtractor",
    "BoardResult",
    "BroadRegexStrategy",
    "DEFAULT_MIN_ID_LENGTH",
    "DeepLinkStrategy",
    "ExtractionFailure",
    "ExtractionOutcome",
    "ExtractionSuccess",
    "HtmlPage",
    "HydrationStateStrategy",
    "JsonLdStrategy",
    "LiveDomPage",
    "PageMetadata",
    "PageSnapshot",
    "ReactPropsStrategy",
    "RegexStrategy",
    "Strategy",
    "as_candidate",
    "default_strategies",
    "detect_login_wall",
    "find_key",
    "is_valid_identifier",
    "read_metadata",
]
