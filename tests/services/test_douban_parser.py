from __future__ import annotations

import pytest

from app.core.exceptions import UpstreamParseFailure
from app.services.douban.parser import parse_search_subjects, parse_top250_html


def test_parse_search_subjects_maps_fields(search_payload) -> None:
    items = parse_search_subjects(search_payload)

    assert len(items) == 2
    first, second = items
    assert first.id == "36081094"
    assert first.title == "热辣滚烫"
    assert first.rate == "8.1"
    assert first.poster == (
        "https://search.pstatic.net/common?src="
        "https://img9.doubanio.com/view/photo/s_ratio_poster/public/p2903273413.jpg"
    )
    assert second.id == "36151692"
    assert first.year == "" and second.year == ""


def test_parse_search_subjects_tolerates_missing_and_numeric_values() -> None:
    items = parse_search_subjects({"subjects": [{"id": 123, "title": "无封面", "rate": None}]})

    assert items[0].id == "123"
    assert items[0].poster == ""
    assert items[0].rate == ""


def test_parse_search_subjects_empty_list() -> None:
    assert parse_search_subjects({"subjects": []}) == []


@pytest.mark.parametrize("payload", [[], {"msg": "rate limited"}, {"subjects": "nope"}, {"subjects": ["x"]}])
def test_parse_search_subjects_rejects_unexpected_shapes(payload) -> None:
    with pytest.raises(UpstreamParseFailure):
        parse_search_subjects(payload)


def test_parse_top250_html_from_fixture(top250_html) -> None:
    items = parse_top250_html(top250_html)

    assert [item.id for item in items] == ["1292052", "1291546", "1292720"]
    assert [item.rate for item in items] == ["9.7", "9.6", "9.4"]
    assert items[1].title == "霸王别姬"
    assert items[1].poster == (
        "https://search.pstatic.net/common?src="
        "https://img1.doubanio.com/view/photo/s_ratio_poster/public/p2561716440.webp"
    )


def test_parse_top250_html_unescapes_title_and_keeps_foreign_poster(top250_html) -> None:
    leon = parse_top250_html(top250_html)[2]

    assert leon.title == "Léon & Mathilda"
    assert leon.poster == "https://example.com/posters/leon.jpg"


def test_parse_top250_html_empty_rating() -> None:
    markup = (
        '<div class="item"><a href="http://movie.douban.com/subject/42/">'
        '<img alt="无评分" src="https://img2.doubanio.com/p42.jpg"></a>'
        '<span class="rating_num" property="v:average"></span></div>'
    )

    items = parse_top250_html(markup)

    assert len(items) == 1
    assert items[0].id == "42"
    assert items[0].rate == ""


@pytest.mark.parametrize("markup", ["", "<html><body><ol class='grid_view'></ol></body></html>"])
def test_parse_top250_html_without_matches_returns_empty(markup) -> None:
    assert parse_top250_html(markup) == []
