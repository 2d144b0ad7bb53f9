import httpx

from app.core.config import settings
from app.core.constants import DOUBAN_IMAGE_HOST, IMAGE_PROXY_HOST


def _on_host(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def proxy_image_url(url: str | None, prefix: str | None = None) -> str:
    """
    Route a Douban poster through the public image proxy.

    Douban's image CDN refuses hotlinking without a Douban referer, so
    ``img*.doubanio.com`` URLs are rewritten to ``<prefix><raw url>``.
    URLs that are already proxied, or that live on any other host, are
    returned unchanged. Only the URL's host is considered, never its
    path or query.
    """
    if not url:
        return ""
    try:
        host = httpx.URL(url).host.lower()
    except httpx.InvalidURL:
        return url
    if _on_host(host, IMAGE_PROXY_HOST) or not _on_host(host, DOUBAN_IMAGE_HOST):
        return url
    return f"{prefix or settings.IMAGE_PROXY_PREFIX}{url}"
