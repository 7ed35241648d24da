"""
Transport adapter: supplies fetched page HTML to the extraction core.
"""

from .client import RelayTransport
from .relays import BACKENDS, DirectBackend, JsonEnvelopeBackend, RelayBackend, RelayError, get_backend

__all__ = [
    "BACKENDS",
    "DirectBackend",
    "JsonEnvelopeBackend",
    "RelayBackend",
    "RelayError",
    "RelayTransport",
    "get_backend",
]
