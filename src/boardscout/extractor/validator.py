"""
Gate for candidate board identifiers.
"""

from __future__ import annotations

import re
from typing import Any, Optional

DEFAULT_MIN_ID_LENGTH = 6

# ASCII only; str.isdigit() would also accept other Unicode digit characters
_DIGITS = re.compile(r"[0-9]+")


def is_valid_identifier(candidate: Optional[str], min_length: int = DEFAULT_MIN_ID_LENGTH) -> bool:
    """Return True when ``candidate`` is an all-digit string of at least ``min_length`` characters.

    Whitespace, signs, decimal points and letters all fail the check.
    """
    if not candidate or not isinstance(candidate, str):
        return False
    if len(candidate) < min_length:
        return False
    return _DIGITS.fullmatch(candidate) is not None


def as_candidate(value: Any) -> Optional[str]:
    """Turn a decoded JSON scalar into a candidate string, or None if it can't be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None
