"""Segment a located content node into heading and paragraph blocks.

Two paths:

* structural - every <h1>-<h6>, <p> and <div> descendant in document order,
  noise ancestors included; each element is measured by its own visible
  text, so only its noise descendants drop out.  Anything shorter than
  ``min_block_chars`` is skipped; a <div> only counts as a paragraph once
  its text is longer than ``min_div_paragraph_chars``.
* sentences  - when the structural walk produces fewer than
  ``min_structured_blocks`` blocks, split the node's whole text on sentence
  punctuation instead.  Heading information is lost on this path.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import Tag

from easyread.errors import SegmentationFailure
from easyread.extractors.noise import visible_text
from easyread.extractors.text import clean_text, split_sentences
from easyread.items import ContentBlock
from easyread.profiles import DEFAULT_PROFILE, ExtractionProfile

logger = logging.getLogger(__name__)

# Heading tags → level number
_HEADING_LEVELS: dict[str, int] = {f"h{i}": i for i in range(1, 7)}

_BLOCK_TAGS: list[str] = [*_HEADING_LEVELS, "p", "div"]


class Segmentation(NamedTuple):
    blocks: tuple[ContentBlock, ...]
    method: str  # "structural" | "sentences"


def structural_blocks(
    node: Tag,
    profile: ExtractionProfile = DEFAULT_PROFILE,
) -> list[ContentBlock]:
    """Emit one block per qualifying heading, paragraph or text-heavy div."""
    blocks: list[ContentBlock] = []
    for el in node.find_all(_BLOCK_TAGS):
        text = clean_text(visible_text(el, profile))
        if len(text) < profile.min_block_chars:
            continue
        if el.name in _HEADING_LEVELS:
            blocks.append(ContentBlock.heading(_HEADING_LEVELS[el.name], text))
        elif el.name == "p" or len(text) > profile.min_div_paragraph_chars:
            blocks.append(ContentBlock.paragraph(text))
    return blocks


def sentence_blocks(
    node: Tag,
    profile: ExtractionProfile = DEFAULT_PROFILE,
) -> list[ContentBlock]:
    full_text = clean_text(visible_text(node, profile))
    return [
        ContentBlock.paragraph(sentence)
        for sentence in split_sentences(full_text, profile.min_sentence_chars)
    ]


def segment_blocks(
    node: Tag,
    profile: ExtractionProfile = DEFAULT_PROFILE,
    *,
    url: str = "",
) -> Segmentation:
    """Return the ordered blocks of *node* and the path that produced them.

    Raises:
        SegmentationFailure: if neither path produces a block.
    """
    blocks = structural_blocks(node, profile)
    method = "structural"
    if len(blocks) < profile.min_structured_blocks:
        logger.debug(
            "structural walk gave %d block(s) for %s, splitting sentences",
            len(blocks), url,
        )
        blocks = sentence_blocks(node, profile)
        method = "sentences"

    if not blocks:
        raise SegmentationFailure(
            "Could not extract readable content from this webpage", url=url,
        )
    logger.debug("segmented %d %s block(s) for %s", len(blocks), method, url)
    return Segmentation(blocks=tuple(blocks), method=method)
