import asyncio
from typing import Any

import httpx
from loguru import logger

from app.core.exceptions import UpstreamHTTPError, UpstreamParseFailure, UpstreamTimeout


class BaseClient:
    """
    Base asynchronous HTTP client with timeout handling and logging.

    Requests are made exactly once and bounded by ``timeout`` seconds end to
    end. Failures are translated into ``UpstreamError`` subclasses so callers
    only deal with one family.
    """

    upstream_name: str = "Upstream"

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
                transport=self.transport,
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Internal request handler; raises UpstreamError subclasses on failure."""
        client = await self.get_client()
        try:
            # httpx timeouts apply per connect/read step; wait_for bounds the whole exchange
            response = await asyncio.wait_for(client.request(method, url, **kwargs), self.timeout)
            response.raise_for_status()
            return response
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(f"Request timed out ({method} {url}) after {self.timeout}s")
            raise UpstreamTimeout(f"{self.upstream_name} Request Timeout") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Request failed ({method} {url}): HTTP {status}")
            raise UpstreamHTTPError(f"{self.upstream_name} API Error: {status} {e.response.reason_phrase}") from e
        except httpx.RequestError as e:
            logger.warning(f"Request failed ({method} {url}): {str(e)}")
            raise UpstreamHTTPError(f"{self.upstream_name} request failed: {str(e)}") from e

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the decoded JSON body."""
        response = await self._request("GET", url, params=params, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamParseFailure(f"Invalid JSON from {self.upstream_name}: {str(e)}") from e

    async def get_text(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> str:
        """Perform a GET request and return the body as text."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.text
