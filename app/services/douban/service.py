from loguru import logger

from app.core.constants import TOP250_TAG
from app.models.douban import CatalogItem
from app.services.douban.client import DoubanClient
from app.services.douban.parser import parse_search_subjects, parse_top250_html


class DoubanService:
    """
    Fetches Douban listings and normalizes them into ``CatalogItem`` lists.

    Two upstream shapes are supported: the JSON search endpoint used for
    ordinary tags, and the scraped Top250 HTML page for the reserved
    ``top250`` tag.
    """

    def __init__(self, client: DoubanClient | None = None):
        self.client = client or DoubanClient()

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def search_subjects(self, content_type: str, tag: str, page_size: int, page_start: int) -> list[CatalogItem]:
        """Fetch one page of a tag from the structured search endpoint."""
        params = {
            "type": content_type,
            "tag": tag,
            "sort": "recommend",
            "page_limit": page_size,
            "page_start": page_start,
        }
        logger.info(f"Fetching Douban subjects type={content_type} tag={tag} limit={page_size} start={page_start}")
        payload = await self.client.get_json("/j/search_subjects", params=params)
        items = parse_search_subjects(payload)
        logger.info(f"Douban returned {len(items)} subjects for tag={tag}")
        return items

    async def get_top250(self, page_start: int) -> list[CatalogItem]:
        """Scrape one page (25 entries upstream) of the Top250 listing."""
        logger.info(f"Fetching Douban Top250 start={page_start}")
        markup = await self.client.get_html("/top250", params={"start": page_start, "filter": ""})
        items = parse_top250_html(markup)
        logger.info(f"Parsed {len(items)} Top250 items")
        return items

    async def get_catalog(self, content_type: str, tag: str, page_size: int, page_start: int) -> list[CatalogItem]:
        """Dispatch to the scrape path for ``top250`` and the search endpoint otherwise."""
        if tag == TOP250_TAG:
            return await self.get_top250(page_start)
        return await self.search_subjects(content_type, tag, page_size, page_start)


douban_service = DoubanService()


def get_douban_service() -> DoubanService:
    return douban_service
