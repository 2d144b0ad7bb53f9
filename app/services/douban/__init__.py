from .client import DoubanClient
from .images import proxy_image_url
from .parser import parse_search_subjects, parse_top250_html
from .service import DoubanService, douban_service, get_douban_service
