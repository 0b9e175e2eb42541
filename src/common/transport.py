from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from .config import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """Base error for the HTTP transport."""


class TransportTimeoutError(TransportError):
    """The exchange did not complete within the configured timeout."""


class TransportConnectError(TransportError):
    """DNS failure, unreachable host or another network-level failure."""


class TransportStatusError(TransportError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class Transport(Protocol):
    async def fetch(self, endpoint: str) -> bytes: ...


class HttpTransport:
    """
    Single-shot HTTP GET transport returning raw response bodies.

    Notes
    - No retries and no caching; callers that need backoff layer it above.
    - Non-2xx answers raise `TransportStatusError` without looking at the body.
    - An injected `httpx.AsyncClient` is used as-is and left open on close.
    """

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def fetch(self, endpoint: str) -> bytes:
        """
        GET `endpoint` and return the complete response body.

        Raises a `TransportError` subclass naming the failure cause.
        """
        try:
            resp = await self._client.get(endpoint)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"Timed out fetching {endpoint}") from exc
        except httpx.TransportError as exc:
            raise TransportConnectError(f"Network error fetching {endpoint}: {exc}") from exc

        if not resp.is_success:
            raise TransportStatusError(
                resp.status_code,
                f"HTTP {resp.status_code} from {endpoint}: {resp.text[:200]}",
            )

        logger.debug("Fetched %d bytes from %s", len(resp.content), endpoint)
        return resp.content


__all__ = [
    "HttpTransport",
    "Transport",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectError",
    "TransportStatusError",
]
