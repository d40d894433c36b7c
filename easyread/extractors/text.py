"""Text normalisation helpers shared by every extraction stage."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")


def clean_text(text: str | None) -> str:
    """Collapse whitespace runs (newlines included) to one space and trim.

    Idempotent: ``clean_text(clean_text(s)) == clean_text(s)``.
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str, min_length: int = 20) -> list[str]:
    """Split *text* on runs of ``.``, ``!`` or ``?``.

    Segments whose cleaned length does not exceed *min_length* are dropped;
    the rest are returned cleaned, in their original order.
    """
    segments = (clean_text(s) for s in _SENTENCE_END_RE.split(text or ""))
    return [s for s in segments if len(s) > min_length]
