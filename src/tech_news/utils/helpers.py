# src/tech_news/utils/helpers.py
"""Display helpers used by the page templates."""

from __future__ import annotations

from datetime import date, datetime


def format_date(value: date | datetime | str) -> str:
    """Render a date as ``M/D/YYYY`` without zero padding.

    Args:
        value: A date, datetime or ISO-8601 string

    Returns:
        The formatted date, e.g. ``3/20/2020``
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{value.month}/{value.day}/{value.year}"


def format_plural(word: str, amount: int) -> str:
    """Lower-case ``word`` and pluralise it with ``s`` unless ``amount`` is exactly 1."""
    word = word.lower()
    if amount != 1:
        return f"{word}s"
    return word


def format_url(url: str) -> str:
    """Shorten a link to its bare host for display.

    ``https://www.google.com?q=hello`` becomes ``google.com``.
    """
    host = url.replace("http://", "", 1).replace("https://", "", 1).replace("www.", "", 1)
    return host.split("/")[0].split("?")[0]


__all__ = ["format_date", "format_plural", "format_url"]
