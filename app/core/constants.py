"""
Core constants used across the application. Keep these simple and documented.
"""

# Content types accepted by the upstream search endpoint
CONTENT_TYPES: tuple[str, ...] = ("movie", "tv")

# Reserved tag that selects the scraped Top250 listing instead of the search API
TOP250_TAG: str = "top250"

DEFAULT_PAGE_SIZE: int = 16
MIN_PAGE_SIZE: int = 1
MAX_PAGE_SIZE: int = 100
DEFAULT_PAGE_START: int = 0

SUCCESS_MESSAGE: str = "获取成功"
FAILURE_MESSAGE: str = "Failed to fetch data"

BROWSER_USER_AGENT: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)
ACCEPT_JSON: str = "application/json, text/plain, */*"
ACCEPT_HTML: str = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"

# Poster hosts: Douban's own CDN needs a referer, the proxy host does not
DOUBAN_IMAGE_HOST: str = "doubanio.com"
IMAGE_PROXY_HOST: str = "pstatic.net"
