# tests/test_helpers.py
"""Tests for the display helpers registered as template filters."""

from datetime import datetime

import pytest

from tech_news.templating import templates
from tech_news.utils.helpers import format_date, format_plural, format_url


def test_format_date_has_no_zero_padding() -> None:
    assert format_date(datetime(2020, 3, 20, 16, 12, 3)) == "3/20/2020"
    assert format_date(datetime(2021, 11, 5)) == "11/5/2021"


def test_format_date_accepts_iso_strings() -> None:
    assert format_date("2020-03-20T16:12:03") == "3/20/2020"


@pytest.mark.parametrize(
    ("word", "amount", "expected"),
    [
        ("Tiger", 2, "tigers"),
        ("Lion", 1, "lion"),
        ("point", 0, "points"),
        ("Comment", 1, "comment"),
    ],
)
def test_format_plural(word: str, amount: int, expected: str) -> None:
    assert format_plural(word, amount) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://test.com/page/1", "test.com"),
        ("https://www.coolstuff.com/abcdefg/", "coolstuff.com"),
        ("https://www.google.com?q=hello", "google.com"),
        ("https://news.ycombinator.com/item?id=1", "news.ycombinator.com"),
    ],
)
def test_format_url(url: str, expected: str) -> None:
    assert format_url(url) == expected


def test_helpers_are_registered_as_filters() -> None:
    for name in ("format_date", "format_plural", "format_url"):
        assert name in templates.env.filters

    rendered = templates.env.from_string(
        "{{ 2 }} {{ 'Point' | format_plural(2) }} on {{ url | format_url }}"
    ).render(url="https://www.example.com/a?b=c")
    assert rendered == "2 points on example.com"
