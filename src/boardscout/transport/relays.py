"""
Relay backends that fetch a page on our behalf.

Each backend knows how to build its request URL and how to turn its response
into the page HTML; one relay wraps the page in a JSON envelope, the others
return it verbatim.
"""

from __future__ import annotations

from typing import Dict
from urllib.parse import quote

import aiohttp


class RelayError(Exception):
    """A single relay attempt failed; the transport moves on to the next relay."""

    pass


class RelayBackend:
    """Relay returning the target page as the raw response body."""

    def __init__(self, name: str, template: str) -> None:
        self.name = name
        self.template = template

    def request_url(self, target_url: str) -> str:
        return self.template.format(url=quote(target_url, safe=""))

    async def read(self, response: aiohttp.ClientResponse) -> str:
        return await response.text(errors="replace")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class JsonEnvelopeBackend(RelayBackend):
    """Relay wrapping the page in ``{"contents": "<html>..."}``."""

    envelope_field = "contents"

    async def read(self, response: aiohttp.ClientResponse) -> str:
        try:
            payload = await response.json(content_type=None)
        except ValueError as e:
            raise RelayError(f"{self.name} returned a malformed envelope: {e}") from e
        contents = payload.get(self.envelope_field) if isinstance(payload, dict) else None
        if not contents or not isinstance(contents, str):
            raise RelayError(f"Empty content from {self.name}")
        return contents


class DirectBackend(RelayBackend):
    """Fetches the page itself, no relay involved."""

    def __init__(self) -> None:
        super().__init__("direct", "{url}")

    def request_url(self, target_url: str) -> str:
        return target_url


BACKENDS: Dict[str, RelayBackend] = {
    "direct": DirectBackend(),
    "allorigins": JsonEnvelopeBackend("allorigins", "https://api.allorigins.win/get?url={url}"),
    "codetabs": RelayBackend("codetabs", "https://api.codetabs.com/v1/proxy?quest={url}"),
    "corsproxy": RelayBackend("corsproxy", "https://corsproxy.io/?{url}"),
    "thingproxy": RelayBackend("thingproxy", "https://thingproxy.freeboard.io/fetch/{url}"),
}


def get_backend(name: str) -> RelayBackend:
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown relay backend '{name}'. Available backends: {list(BACKENDS)}") from None
