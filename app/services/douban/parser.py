import html
import re
from typing import Any

from loguru import logger

from app.core.exceptions import UpstreamParseFailure
from app.models.douban import CatalogItem, DoubanSubject
from app.services.douban.images import proxy_image_url

# One <div class="item"> block of the Top250 listing: subject id, poster alt/src, rating.
TOP250_ITEM_PATTERN = re.compile(
    r'<div class="item">[\s\S]*?<a[^>]+href="https?://movie\.douban\.com/subject/(\d+)/"'
    r'[\s\S]*?<img[^>]+alt="([^"]+)"[^>]*src="([^"]+)"'
    r'[\s\S]*?<span class="rating_num"[^>]*>([^<]*)</span>[\s\S]*?</div>'
)


def parse_search_subjects(payload: Any) -> list[CatalogItem]:
    """Map a ``/j/search_subjects`` JSON payload to catalog items, preserving order."""
    if not isinstance(payload, dict):
        raise UpstreamParseFailure("Invalid response from Douban: expected a JSON object")
    subjects = payload.get("subjects")
    if not isinstance(subjects, list):
        raise UpstreamParseFailure("Invalid response from Douban: missing subjects list")

    items = []
    for raw in subjects:
        if not isinstance(raw, dict):
            raise UpstreamParseFailure("Invalid response from Douban: subject is not an object")
        subject = DoubanSubject.model_validate(raw)
        items.append(
            CatalogItem(
                id=subject.id,
                title=subject.title,
                poster=proxy_image_url(subject.cover),
                rate=subject.rate,
                year="",
            )
        )
    return items


def parse_top250_html(markup: str) -> list[CatalogItem]:
    """
    Scrape the Top250 listing page.

    Items are returned in document order. Markup that no longer matches the
    pattern simply produces fewer (or no) items.
    """
    items = []
    for match in TOP250_ITEM_PATTERN.finditer(markup or ""):
        subject_id, title, poster, rate = match.groups()
        items.append(
            CatalogItem(
                id=subject_id,
                title=html.unescape(title),
                poster=proxy_image_url(poster),
                rate=rate or "",
                year="",
            )
        )
    if not items and markup:
        logger.warning("Top250 page yielded no items; the page layout may have changed")
    return items
