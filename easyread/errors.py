"""Extraction failures raised by the pipeline."""

from __future__ import annotations


class ExtractionError(RuntimeError):
    """Raised when a page yields no readable document.

    Attributes:
        url -- the page URL, when the caller supplied one
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class LocatorFailure(ExtractionError):
    """No main-content strategy matched any node."""


class SegmentationFailure(ExtractionError):
    """A content node was found but produced zero blocks."""
