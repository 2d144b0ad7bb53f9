from __future__ import annotations

import pytest

from app.services.douban.images import proxy_image_url

PROXY = "https://search.pstatic.net/common?src="


def test_douban_poster_is_proxied() -> None:
    url = "https://img2.doubanio.com/view/photo/s_ratio_poster/public/p480747492.jpg"
    assert proxy_image_url(url) == PROXY + url


def test_already_proxied_poster_is_unchanged() -> None:
    url = PROXY + "https://img2.doubanio.com/view/photo/s_ratio_poster/public/p480747492.jpg"
    assert proxy_image_url(url) == url


def test_other_host_is_unchanged() -> None:
    url = "https://image.tmdb.org/t/p/w500/poster.jpg"
    assert proxy_image_url(url) == url


@pytest.mark.parametrize("url", [None, ""])
def test_empty_poster_becomes_empty_string(url) -> None:
    assert proxy_image_url(url) == ""


def test_custom_prefix() -> None:
    url = "https://img1.doubanio.com/p1.jpg"
    assert proxy_image_url(url, prefix="https://images.example/?u=") == "https://images.example/?u=" + url


def test_douban_subdomain_is_proxied() -> None:
    url = "https://img9.DOUBANIO.com/view/photo/p1.jpg"
    assert proxy_image_url(url) == PROXY + url


@pytest.mark.parametrize(
    "url",
    [
        "https://cdn.example.com/a.jpg?ref=doubanio.com",
        "https://notdoubanio.com/p1.jpg",
        "https://example.com/img2.doubanio.com/p1.jpg",
        "/view/photo/p1.jpg",
    ],
)
def test_only_the_host_decides(url) -> None:
    assert proxy_image_url(url) == url
