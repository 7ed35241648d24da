"""
BoardScout - locate the numeric ID of a Pinterest board from its public page.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .errors import BoardScoutError, InputValidationError, NoIdentifierFoundError, TransportExhaustedError
from .extractor import BoardIdExtractor, ExtractionFailure, ExtractionSuccess
from .service import find_board_id

__all__ = [
    "__version__",
    "Config",
    "BoardIdExtractor",
    "BoardScoutError",
    "ExtractionFailure",
    "ExtractionSuccess",
    "InputValidationError",
    "NoIdentifierFoundError",
    "TransportExhaustedError",
    "find_board_id",
]
