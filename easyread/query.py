"""easyread.query - single-URL fetch and extraction API.

Basic usage::

    from easyread.query import fetch

    document = fetch("https://example.com/blog/some-post")
    print(document.title)
    for block in document.blocks:
        print(block.kind, block.level, block.text)

    # As a plain dict
    data = fetch("https://example.com/blog/some-post").model_dump()

Static pages (no headless browser)::

    document = fetch("https://example.com/blog/post", render_js=False)

Low-level access::

    from easyread.query import render_html, extract

    html = render_html("https://example.com/blog/post")
    document = extract(html, url="https://example.com/blog/post")
"""

from __future__ import annotations

import contextlib
import gzip
import logging
import random
import time
import urllib.error
import urllib.request
import zlib
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from easyread import settings
from easyread.extractors.blocks import segment_blocks
from easyread.extractors.main_content import locate_main_content
from easyread.extractors.title import extract_title
from easyread.items import ExtractedDocument
from easyread.profiles import DEFAULT_PROFILE, ExtractionProfile

logger = logging.getLogger(__name__)

_DEFAULT_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


# ---------------------------------------------------------------------------
# Public exception
# ---------------------------------------------------------------------------

class FetchError(RuntimeError):
    """Raised when a URL cannot be loaded.

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


def _check_scheme(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise FetchError(f"Unsupported URL scheme: {parsed.scheme!r}", url=url)


def _decode_response_body(raw: bytes, headers: object | None) -> str:
    encoding = ""
    charset = "utf-8"
    if headers is not None:
        try:
            encoding = str(headers.get("Content-Encoding", "")).lower().strip()
            charset = headers.get_content_charset("utf-8") or "utf-8"
        except Exception:
            encoding, charset = "", "utf-8"

    if encoding == "gzip":
        raw = gzip.decompress(raw)
    elif encoding in ("deflate", "zlib"):
        raw = zlib.decompress(raw)

    try:
        return raw.decode(charset, errors="replace")
    except (LookupError, ValueError):
        return raw.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------

_RETRY_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})


def fetch_html(
    url: str,
    *,
    timeout: int = settings.HTTP_TIMEOUT,
    user_agent: str | None = None,
    max_retries: int = 3,
) -> str:
    """Fetch *url* over plain HTTP and return the decoded body.

    Retries up to *max_retries* times with jittered exponential backoff on
    429/5xx responses and network-level failures.

    Raises:
        FetchError: On HTTP errors, connection failures, or invalid URLs.
    """
    _check_scheme(url)
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": user_agent or _DEFAULT_UA,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
        },
    )

    last_exc: FetchError | None = None
    for attempt in range(max_retries + 1):
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                raw: bytes = resp.read()
                try:
                    return _decode_response_body(raw, resp.headers)
                except (OSError, zlib.error) as exc:
                    raise FetchError(
                        f"Could not decompress response from {url}: {exc}", url=url,
                    ) from exc

        except urllib.error.HTTPError as exc:
            last_exc = FetchError(
                f"HTTP {exc.code} fetching {url}: {exc.reason}", url=url, status=exc.code,
            )
            if exc.code not in _RETRY_CODES or attempt >= max_retries:
                raise last_exc from exc
            reason = f"HTTP {exc.code}"

        except urllib.error.URLError as exc:
            last_exc = FetchError(f"URL error fetching {url}: {exc.reason}", url=url)
            if attempt >= max_retries:
                raise last_exc from exc
            reason = str(exc.reason)

        except OSError as exc:
            last_exc = FetchError(f"Network error fetching {url}: {exc}", url=url)
            if attempt >= max_retries:
                raise last_exc from exc
            reason = str(exc)

        delay = (2 ** attempt) + random.uniform(0, 1)
        logger.debug(
            "%s for %s, retrying in %.1fs (attempt %d/%d)",
            reason, url, delay, attempt + 1, max_retries,
        )
        time.sleep(delay)

    raise last_exc or FetchError(f"All retries exhausted for {url}", url=url)


def render_html(
    url: str,
    *,
    timeout_ms: int = settings.NAVIGATION_TIMEOUT_MS,
    settle_ms: int = settings.SETTLE_DELAY_MS,
    user_agent: str | None = None,
) -> str:
    """Load *url* in headless Chromium and return the rendered DOM as HTML.

    Waits for ``domcontentloaded`` (bounded by *timeout_ms*), then a fixed
    *settle_ms* so client-side scripts can populate the page.

    Raises:
        FetchError: If playwright is missing, navigation fails or times out,
            or the page is empty.
    """
    _check_scheme(url)
    try:
        from playwright.sync_api import sync_playwright
    except ImportError as exc:
        raise FetchError(
            "Rendering requires playwright: pip install playwright && "
            "playwright install chromium",
            url=url,
        ) from exc

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=list(settings.BROWSER_ARGS))
            try:
                page = browser.new_page(user_agent=user_agent or _DEFAULT_UA)
                page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
                page.wait_for_timeout(settle_ms)
                html: str = page.content()
            finally:
                with contextlib.suppress(Exception):
                    browser.close()
    except FetchError:
        raise
    except Exception as exc:
        raise FetchError(f"Playwright error loading {url}: {exc}", url=url) from exc

    if not html.strip():
        raise FetchError(f"Playwright returned empty page for {url}", url=url)
    return html


# ---------------------------------------------------------------------------
# Extraction (pure DOM → ExtractedDocument, no network)
# ---------------------------------------------------------------------------

def extract(
    html: str | BeautifulSoup,
    *,
    url: str = "",
    profile: ExtractionProfile | None = None,
) -> ExtractedDocument:
    """Run the extraction pipeline over *html* and return the reading document.

    Args:
        html:    Raw HTML string, or an already-parsed BeautifulSoup tree
                 (which is only read, never modified).
        url:     Original URL of the page; attached to the result as
                 ``source_url``.
        profile: Optional :class:`~easyread.profiles.ExtractionProfile`.

    Raises:
        LocatorFailure: no content node could be located.
        SegmentationFailure: the content node produced no blocks.
    """
    profile = profile or DEFAULT_PROFILE
    soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html or "", "lxml")

    match = locate_main_content(soup, profile, url=url)
    title = extract_title(soup, profile)
    segmentation = segment_blocks(match.node, profile, url=url)

    return ExtractedDocument(
        title=title,
        blocks=segmentation.blocks,
        source_url=url,
        extraction_method=segmentation.method,
        content_strategy=match.strategy,
    )


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def fetch(
    url: str,
    *,
    render_js: bool = True,
    timeout: int | None = None,
    user_agent: str | None = None,
    profile: ExtractionProfile | None = None,
) -> ExtractedDocument:
    """Load *url* and return its :class:`~easyread.items.ExtractedDocument`.

    Args:
        url:        Fully-qualified HTTP/HTTPS URL.
        render_js:  Render the page in headless Chromium (default).  With
                    ``False`` the raw HTTP response is used instead.
        timeout:    Network/navigation timeout in seconds (defaults come
                    from :mod:`easyread.settings`).
        user_agent: Custom User-Agent string.
        profile:    Optional extraction profile.

    Raises:
        FetchError: the page could not be loaded.
        ExtractionError: the page loaded but has no readable content.
    """
    logger.info("fetch: %s (render_js=%s)", url, render_js)
    if render_js:
        timeout_ms = timeout * 1_000 if timeout else settings.NAVIGATION_TIMEOUT_MS
        html = render_html(url, timeout_ms=timeout_ms, user_agent=user_agent)
    else:
        html = fetch_html(url, timeout=timeout or settings.HTTP_TIMEOUT, user_agent=user_agent)
    return extract(html, url=url, profile=profile)
