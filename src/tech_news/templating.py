# src/tech_news/templating.py
"""Jinja2 environment shared by the page routes."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from tech_news.utils.helpers import format_date, format_plural, format_url

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["format_plural"] = format_plural
templates.env.filters["format_url"] = format_url
