"""easyread - turn any web page into a clean, dyslexia-friendly reading document.

Quick single-URL usage::

    from easyread import fetch

    document = fetch("https://example.com/blog/some-post")
    print(document.title)
    print(document.to_markdown())

Pre-fetched HTML::

    from easyread import extract

    document = extract(html, url="https://example.com/blog/some-post")

Per-site tuning::

    from easyread import fetch, load_profile

    url = "https://example.com/blog/some-post"
    document = fetch(url, profile=load_profile("profiles.yaml", url))
"""

from easyread.errors import ExtractionError, LocatorFailure, SegmentationFailure
from easyread.items import BlockKind, ContentBlock, ExtractedDocument
from easyread.profiles import ExtractionProfile, load_profile
from easyread.query import FetchError, extract, fetch, fetch_html, render_html

__version__ = "0.1.0"
__all__ = [
    "BlockKind",
    "ContentBlock",
    "ExtractedDocument",
    "ExtractionError",
    "ExtractionProfile",
    "FetchError",
    "LocatorFailure",
    "SegmentationFailure",
    "extract",
    "fetch",
    "fetch_html",
    "load_profile",
    "render_html",
]
