"""Extraction sub-package: deterministic, template-agnostic reading-view extraction."""

from .blocks import segment_blocks
from .main_content import locate_main_content
from .noise import is_noise, visible_text
from .text import clean_text, split_sentences
from .title import extract_title

__all__ = [
    "clean_text",
    "extract_title",
    "is_noise",
    "locate_main_content",
    "segment_blocks",
    "split_sentences",
    "visible_text",
]
