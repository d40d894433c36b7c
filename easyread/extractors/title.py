"""Title extraction.

Priority chain (highest → lowest), first non-empty cleaned value wins:
    <h1> → <title> → og:title → .title/#title → .post-title → .article-title
    → raw document title → "Untitled Article"
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from easyread.extractors.text import clean_text
from easyread.profiles import DEFAULT_PROFILE, ExtractionProfile

logger = logging.getLogger(__name__)


def _text_of(selector: str) -> Callable[[BeautifulSoup], str]:
    def _extract(soup: BeautifulSoup) -> str:
        el = soup.select_one(selector)
        return clean_text(el.get_text()) if isinstance(el, Tag) else ""

    _extract.__name__ = f"text_of({selector})"
    return _extract


def og_title(soup: BeautifulSoup) -> str:
    """``content`` attribute of the og:title meta tag (not its text)."""
    el = soup.select_one('meta[property="og:title"]')
    if not isinstance(el, Tag):
        return ""
    content = el.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    return clean_text(content)


TITLE_STRATEGIES: tuple[tuple[str, Callable[[BeautifulSoup], str]], ...] = (
    ("h1", _text_of("h1")),
    ("title", _text_of("title")),
    ("og:title", og_title),
    ("title_class", _text_of(".title, #title")),
    ("post_title", _text_of(".post-title")),
    ("article_title", _text_of(".article-title")),
)


def _document_title(soup: BeautifulSoup) -> str:
    el = soup.title
    return el.get_text() if isinstance(el, Tag) else ""


def extract_title(
    soup: BeautifulSoup,
    profile: ExtractionProfile = DEFAULT_PROFILE,
) -> str:
    """Return the best title for the page; never an empty string."""
    for name, strategy in TITLE_STRATEGIES:
        title = strategy(soup)
        if title:
            logger.debug("title found by %s: %r", name, title)
            return title
    return clean_text(_document_title(soup)) or profile.untitled
