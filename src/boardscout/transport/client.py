"""
Relay transport: fetches board page HTML through an ordered list of relays.
"""

from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence

import aiohttp
import structlog

from ..config.config import TransportConfig
from ..errors import TransportExhaustedError
from ..observability.metrics import increment, observe
from .relays import RelayBackend, RelayError, get_backend

logger = structlog.get_logger(__name__)


class RelayTransport:
    """
    Tries each relay in turn until one returns a full page.

    An attempt fails on timeout, a non-2xx status, an empty envelope or any
    client error; the next relay is then tried. A payload longer than
    ``accept_length`` is returned at once. Shorter payloads are kept as a
    fallback and accepted after the last relay only if they reach
    ``min_content_length``; relay placeholder pages are usually shorter.
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        backends: Optional[Sequence[RelayBackend]] = None,
    ) -> None:
        self.config = config or TransportConfig()
        if backends is None:
            backends = [get_backend(name) for name in self.config.backends]
        self.backends: List[RelayBackend] = list(backends)
        self.session: Optional[aiohttp.ClientSession] = None
        self._owns_session = False

    async def initialize(self) -> None:
        """Initialize the HTTP client session."""
        if self.session is None:
            self.session = aiohttp.ClientSession(headers={"User-Agent": self.config.user_agent})
            self._owns_session = True

    async def close(self) -> None:
        if self.session is not None and self._owns_session:
            await self.session.close()
        self.session = None
        self._owns_session = False

    async def __aenter__(self) -> "RelayTransport":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _attempt(self, backend: RelayBackend, url: str) -> str:
        """Fetch ``url`` through one relay, bounded by the per-attempt timeout."""
        if self.session is None:
            raise RuntimeError("HTTP client not initialized. Call initialize() or use async context manager.")
        async with asyncio.timeout(self.config.timeout):
            async with self.session.get(backend.request_url(url)) as response:
                if not 200 <= response.status < 300:
                    raise RelayError(f"{backend.name} responded with status {response.status}")
                return await backend.read(response)

    async def fetch(self, url: str) -> str:
        """
        Fetch the page HTML for ``url``.

        Args:
            url: Canonical board URL

        Returns:
            The page HTML

        Raises:
            TransportExhaustedError: every relay failed or only undersized payloads came back
        """
        if self.session is None:
            await self.initialize()

        best = ""
        for backend in self.backends:
            start_time = time.perf_counter()
            try:
                html = await self._attempt(backend, url)
            except asyncio.TimeoutError:
                logger.warning("Relay attempt timed out", backend=backend.name, url=url, timeout=self.config.timeout)
                increment("relay_attempts_total", labels={"backend": backend.name, "result": "timeout"})
                continue
            except (RelayError, aiohttp.ClientError) as e:
                logger.warning("Relay attempt failed", backend=backend.name, url=url, error=str(e))
                increment("relay_attempts_total", labels={"backend": backend.name, "result": "error"})
                continue
            finally:
                observe("relay_fetch_seconds", time.perf_counter() - start_time, labels={"backend": backend.name})

            if len(html) > self.config.accept_length:
                logger.debug("Relay attempt succeeded", backend=backend.name, url=url, length=len(html))
                increment("relay_attempts_total", labels={"backend": backend.name, "result": "ok"})
                return html

            logger.warning("Relay returned an undersized payload", backend=backend.name, url=url, length=len(html))
            increment("relay_attempts_total", labels={"backend": backend.name, "result": "undersized"})
            if len(html) > len(best):
                best = html

        if len(best) >= self.config.min_content_length:
            return best

        logger.error("All relays failed", url=url, relays=[backend.name for backend in self.backends])
        raise TransportExhaustedError(attempts=len(self.backends))
