"""Project settings for easyread.

Module-level defaults for the extraction pipeline and the page loader.
Extraction thresholds can be overridden per site through YAML profiles
(see :mod:`easyread.profiles`); loader timings through environment variables.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Noise stripping
# ---------------------------------------------------------------------------
NOISE_TAGS: tuple[str, ...] = (
    "script",
    "style",
    "nav",
    "header",
    "footer",
    "aside",
)

# ARIA landmark roles equivalent to the tags above
NOISE_ROLES: tuple[str, ...] = (
    "navigation",
    "banner",
    "contentinfo",
    "complementary",
)

# Class markers for ads and social widgets
NOISE_CLASSES: tuple[str, ...] = (
    "advertisement",
    "ads",
    "social-share",
)

# ---------------------------------------------------------------------------
# Main-content location
# ---------------------------------------------------------------------------
CONTENT_SELECTORS: tuple[str, ...] = (
    ".content",
    ".post-content",
    ".article-content",
    ".entry-content",
    ".main-content",
    "#content",
    "#main-content",
)

# ---------------------------------------------------------------------------
# Title extraction
# ---------------------------------------------------------------------------
UNTITLED = "Untitled Article"

# ---------------------------------------------------------------------------
# Block segmentation
# ---------------------------------------------------------------------------
MIN_BLOCK_CHARS = 10
MIN_DIV_PARAGRAPH_CHARS = 50
MIN_STRUCTURED_BLOCKS = 3
MIN_SENTENCE_CHARS = 20

# Reading speed used for reading-time estimates (words per minute)
WORDS_PER_MINUTE = 200

# ---------------------------------------------------------------------------
# Loader (headless browser / plain HTTP)
# ---------------------------------------------------------------------------
NAVIGATION_TIMEOUT_MS = int(os.getenv("EASYREAD_NAV_TIMEOUT_MS", "30000"))
SETTLE_DELAY_MS = int(os.getenv("EASYREAD_SETTLE_MS", "2000"))
HTTP_TIMEOUT = 30

BROWSER_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
