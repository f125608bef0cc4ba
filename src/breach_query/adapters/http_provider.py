"""
HTTP Breach Providers.

Fetch the breach list from a Firefox Monitor or Have I Been Pwned server
with httpx. One GET per call, no retries, no auth headers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import httpx

from breach_query.config.models import HttpConfig

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when the breach list cannot be fetched or decoded."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.message = message
        self.status_code = status_code


class _BaseHttpProvider:
    """Shared URL building and response decoding."""

    def __init__(self, config: Optional[HttpConfig] = None) -> None:
        self.config = config or HttpConfig()

    def build_url(self, endpoint: Optional[str] = None) -> str:
        """Resolve endpoint against the configured server."""
        return urljoin(self.config.server, endpoint or self.config.endpoint)

    def _client_options(self) -> Dict[str, Any]:
        return {
            "timeout": httpx.Timeout(self.config.timeout_seconds),
            "headers": {"user-agent": self.config.user_agent},
            "follow_redirects": True,
        }

    def _decode(self, url: str, response: httpx.Response) -> List[Dict[str, Any]]:
        """Check status and decode the JSON array body."""
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Breach fetch failed: HTTP {response.status_code} from {url}")
            raise TransportError(
                url,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Breach fetch returned malformed JSON from {url}")
            raise TransportError(url, "Malformed JSON body") from e

        if not isinstance(data, list):
            raise TransportError(
                url, f"Expected a JSON array, got {type(data).__name__}"
            )

        logger.info(f"Fetched {len(data)} breaches from {url}")
        return data


class HttpBreachProvider(_BaseHttpProvider):
    """Synchronous provider backed by httpx.Client."""

    def __init__(
        self,
        config: Optional[HttpConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            config: HTTP settings (server, endpoint, timeout)
            transport: Optional httpx transport, e.g. httpx.MockTransport
        """
        super().__init__(config)
        self._transport = transport

    def fetch_breaches(self, endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Fetch the raw breach list.

        Raises:
            TransportError: On network failure, non-2xx status or bad body
        """
        url = self.build_url(endpoint)
        logger.debug(f"GET {url}")
        try:
            with httpx.Client(transport=self._transport, **self._client_options()) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Breach fetch failed: {e!r}")
            raise TransportError(url, f"Request failed: {e}") from e

        return self._decode(url, response)


class AsyncHttpBreachProvider(_BaseHttpProvider):
    """Asynchronous provider backed by httpx.AsyncClient."""

    def __init__(
        self,
        config: Optional[HttpConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport

    async def afetch_breaches(
        self, endpoint: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch the raw breach list without blocking the event loop.

        Raises:
            TransportError: On network failure, non-2xx status or bad body
        """
        url = self.build_url(endpoint)
        logger.debug(f"GET {url} (async)")
        try:
            async with httpx.AsyncClient(
                transport=self._transport, **self._client_options()
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Breach fetch failed: {e!r}")
            raise TransportError(url, f"Request failed: {e}") from e

        return self._decode(url, response)
