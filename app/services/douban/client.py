from typing import Any

import httpx

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.constants import ACCEPT_HTML, ACCEPT_JSON, BROWSER_USER_AGENT


class DoubanClient(BaseClient):
    """
    Client for movie.douban.com.

    Douban rejects requests without a browser-looking User-Agent and a
    Douban referer, so both are sent on every call.
    """

    upstream_name = "Douban"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        base_url = (base_url or settings.DOUBAN_BASE_URL).rstrip("/")
        headers = {
            "User-Agent": BROWSER_USER_AGENT,
            "Referer": f"{base_url}/",
        }
        super().__init__(
            base_url=base_url,
            timeout=timeout if timeout is not None else settings.DOUBAN_TIMEOUT,
            headers=headers,
            transport=transport,
        )

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        return await self.get(url, params=params, headers={"Accept": ACCEPT_JSON})

    async def get_html(self, url: str, params: dict[str, Any] | None = None) -> str:
        return await self.get_text(url, params=params, headers={"Accept": ACCEPT_HTML})
