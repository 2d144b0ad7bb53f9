import re

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import get_cache_time
from app.core.constants import (
    CONTENT_TYPES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_START,
    FAILURE_MESSAGE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    SUCCESS_MESSAGE,
)
from app.core.exceptions import CatalogError, InvalidParameter, MissingParameter
from app.models.douban import CatalogItem, CatalogResult, ErrorResponse
from app.services.douban import DoubanService, get_douban_service

router = APIRouter(prefix="/api", tags=["douban"])


LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def _parse_int(value: str | None, default: int) -> int:
    """Read the leading integer of ``value`` ("20abc" -> 20, "16.5" -> 16); default when there is none."""
    match = LEADING_INT_PATTERN.match(value or "")
    if not match:
        return default
    return int(match.group(1))


def clamp_page_size(value: str | None) -> int:
    return min(max(_parse_int(value, DEFAULT_PAGE_SIZE), MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def clamp_page_start(value: str | None) -> int:
    return max(_parse_int(value, DEFAULT_PAGE_START), 0)


def validate_params(content_type: str | None, tag: str | None) -> tuple[str, str]:
    """Check the required query parameters, naming every one that is missing."""
    missing = [name for name, value in (("type", content_type), ("tag", tag)) if not value]
    if missing:
        raise MissingParameter(f"Missing parameters: {', '.join(missing)}")
    if content_type not in CONTENT_TYPES:
        raise InvalidParameter(f"Invalid type: must be {' or '.join(CONTENT_TYPES)}")
    return content_type, tag


def cache_headers(cache_time: int) -> dict[str, str]:
    return {
        "Cache-Control": f"public, max-age={cache_time}, s-maxage={cache_time}",
        "CDN-Cache-Control": f"public, s-maxage={cache_time}",
        "Vercel-CDN-Cache-Control": f"public, s-maxage={cache_time}",
        "Netlify-Vary": "query",
    }


def _error_response(error: str, details: str | None, status_code: int) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status_code)


def build_success_response(items: list[CatalogItem]) -> JSONResponse:
    result = CatalogResult(code=200, message=SUCCESS_MESSAGE, list=items)
    return JSONResponse(result.model_dump(), headers=cache_headers(get_cache_time()))


@router.get("/douban")
async def get_douban_catalog(
    content_type: str | None = Query(None, alias="type"),
    tag: str | None = None,
    page_size: str | None = Query(None, alias="pageSize"),
    page_start: str | None = Query(None, alias="pageStart"),
    service: DoubanService = Depends(get_douban_service),
):
    """
    Proxy a Douban listing as ``{code, message, list}``.

    ``tag=top250`` scrapes the Top250 page; any other tag goes through
    Douban's JSON search endpoint.
    """
    try:
        content_type, tag = validate_params(content_type, tag)
    except CatalogError as e:
        logger.warning(f"Rejected Douban request: {e.message}")
        return _error_response(e.message, None, e.status_code)

    size = clamp_page_size(page_size)
    start = clamp_page_start(page_start)

    try:
        items = await service.get_catalog(content_type, tag, size, start)
    except CatalogError as e:
        logger.error(f"Douban fetch failed for {content_type}/{tag}: {e.message}")
        return _error_response(FAILURE_MESSAGE, e.message, e.status_code)
    except Exception as e:
        logger.exception(f"Unexpected error fetching Douban {content_type}/{tag}: {e}")
        return _error_response(FAILURE_MESSAGE, str(e), 500)

    return build_success_response(items)
