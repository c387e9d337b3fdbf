"""HTTP transport used for both the catalog and the archive download.

The rest of the package only depends on the :class:`Transport` protocol,
``get(url, accept) -> bytes``, so tests can swap in an in-memory double.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from spring_starter.errors import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def get(self, url: str, accept: str) -> bytes:
        """Return the body of a 200 response, or raise ``TransportError``."""
        ...


class HttpTransport:
    """``Transport`` backed by ``httpx.AsyncClient``.

    A fresh client is opened for every request and closed before returning,
    so no connection outlives the call that needed it.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=min(10.0, self.timeout)),
            follow_redirects=True,
            transport=self._transport,
        )

    async def get(self, url: str, accept: str) -> bytes:
        logger.debug("GET %s (Accept: %s)", url, accept)
        try:
            async with self._client() as client:
                response = await client.get(url, headers={"Accept": accept})
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out after {self.timeout}s.") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Cannot reach {url}: {exc}") from exc

        if response.status_code != 200:
            raise TransportError(
                f"{url} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        return response.content
