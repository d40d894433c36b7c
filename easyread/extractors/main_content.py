"""Main-content location with a five-strategy cascade.

Strategies are tried in order and the first one to return a node wins:

1. ``article``       first <article>
2. ``main``          first <main>
3. ``role_main``     first element with role="main"
4. ``selectors``     first match of the common content-container selectors
5. ``largest_text``  <div>/<section> with the longest cleaned visible text

The whole document is never used as a fallback; when every strategy comes
up empty :class:`~easyread.errors.LocatorFailure` is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from easyread.errors import LocatorFailure
from easyread.extractors.noise import visible_text
from easyread.extractors.text import clean_text
from easyread.profiles import DEFAULT_PROFILE, ExtractionProfile

logger = logging.getLogger(__name__)

Strategy = Callable[[BeautifulSoup, ExtractionProfile], "Tag | None"]


class ContentMatch(NamedTuple):
    node: Tag
    strategy: str


def _first(soup: BeautifulSoup, selector: str) -> Tag | None:
    try:
        el = soup.select_one(selector)
    except SelectorSyntaxError as exc:
        logger.debug("CSS selector %r failed: %s", selector, exc)
        return None
    return el if isinstance(el, Tag) else None


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def find_article(soup: BeautifulSoup, profile: ExtractionProfile) -> Tag | None:
    return _first(soup, "article")


def find_main(soup: BeautifulSoup, profile: ExtractionProfile) -> Tag | None:
    return _first(soup, "main")


def find_role_main(soup: BeautifulSoup, profile: ExtractionProfile) -> Tag | None:
    return _first(soup, '[role="main"]')


def find_by_selectors(soup: BeautifulSoup, profile: ExtractionProfile) -> Tag | None:
    """First match of the first selector (in listed order) that matches anything."""
    for selector in profile.all_content_selectors:
        el = _first(soup, selector)
        if el is not None:
            return el
    return None


def find_largest_text(soup: BeautifulSoup, profile: ExtractionProfile) -> Tag | None:
    """Return the <div>/<section> with the most cleaned visible text.

    Each element is scored independently, so an ancestor also counts the
    text of its descendants.  Strict ``>`` keeps the first element of
    maximal length in document order.
    """
    best: Tag | None = None
    best_len = 0
    for el in soup.find_all(["div", "section"]):
        if not isinstance(el, Tag):
            continue
        length = len(clean_text(visible_text(el, profile)))
        if length > best_len:
            best_len = length
            best = el
    return best


STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("article", find_article),
    ("main", find_main),
    ("role_main", find_role_main),
    ("selectors", find_by_selectors),
    ("largest_text", find_largest_text),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def locate_main_content(
    soup: BeautifulSoup,
    profile: ExtractionProfile = DEFAULT_PROFILE,
    *,
    url: str = "",
) -> ContentMatch:
    """Return the node most likely to hold the article body.

    Raises:
        LocatorFailure: if no strategy yields a node.
    """
    for name, strategy in STRATEGIES:
        node = strategy(soup, profile)
        if node is not None:
            logger.debug("main content located by %s <%s> for %s", name, node.name, url)
            return ContentMatch(node=node, strategy=name)
    raise LocatorFailure("Could not find readable content on this page", url=url)
