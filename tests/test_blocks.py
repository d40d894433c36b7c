"""Tests for block segmentation (structural walk + sentence fallback)."""

from __future__ import annotations

import pytest

from easyread.errors import SegmentationFailure
from easyread.extractors.blocks import (
    segment_blocks,
    sentence_blocks,
    structural_blocks,
)
from easyread.items import BlockKind, ContentBlock
from easyread.profiles import ExtractionProfile

FILLER = "This paragraph is long enough to survive every length filter"


def _node(make_soup, html: str):
    return make_soup(f"<html><body><article>{html}</article></body></html>").find("article")


class TestStructuralBlocks:
    def test_headings_and_paragraphs(self, make_soup):
        node = _node(
            make_soup,
            "<h1>The main heading</h1><p>A paragraph of text.</p>"
            "<h3>Third level heading</h3><h6>Sixth level heading</h6>",
        )
        assert structural_blocks(node) == [
            ContentBlock.heading(1, "The main heading"),
            ContentBlock.paragraph("A paragraph of text."),
            ContentBlock.heading(3, "Third level heading"),
            ContentBlock.heading(6, "Sixth level heading"),
        ]

    def test_short_elements_skipped(self, make_soup):
        node = _node(make_soup, "<h2>Tiny</h2><p>123456789</p><p>1234567890</p>")
        assert structural_blocks(node) == [ContentBlock.paragraph("1234567890")]

    def test_text_is_cleaned(self, make_soup):
        node = _node(make_soup, "<p>\n   spread   over\n\n   lines   </p>")
        assert structural_blocks(node)[0].text == "spread over lines"

    def test_short_div_skipped(self, make_soup):
        node = _node(make_soup, "<div>Twenty characters!!</div>")
        assert structural_blocks(node) == []

    def test_fifty_char_div_skipped(self, make_soup):
        node = _node(make_soup, f"<div>{'x' * 50}</div>")
        assert structural_blocks(node) == []

    def test_long_div_is_paragraph(self, make_soup):
        node = _node(make_soup, f"<div>{'x' * 51}</div>")
        assert structural_blocks(node) == [ContentBlock.paragraph("x" * 51)]

    def test_nested_divs_each_emit(self, make_soup):
        inner = "y" * 60
        node = _node(make_soup, f"<div><div>{inner}</div></div>")
        assert structural_blocks(node) == [
            ContentBlock.paragraph(inner),
            ContentBlock.paragraph(inner),
        ]

    def test_other_tags_ignored(self, make_soup):
        node = _node(make_soup, "<ul><li>A list item that is long</li></ul><span>Span text here</span>")
        assert structural_blocks(node) == []

    def test_elements_under_noise_ancestors_still_emit(self, make_soup):
        node = _node(
            make_soup,
            "<p>Visible paragraph text.</p>"
            "<aside><p>Related article teaser text.</p></aside>"
            "<div class='social-share'><p>Share this with friends.</p></div>"
            "<p>Trailing <script>var x = 1;</script>paragraph.</p>",
        )
        assert [b.text for b in structural_blocks(node)] == [
            "Visible paragraph text.",
            "Related article teaser text.",
            "Share this with friends.",
            "Trailing paragraph.",
        ]

    def test_heading_inside_header_is_kept(self, make_soup):
        node = _node(
            make_soup,
            "<header><h1>How plants drink water</h1></header>"
            "<p>First paragraph text.</p><p>Second paragraph text.</p><p>Third paragraph.</p>",
        )
        result = segment_blocks(node)
        assert result.method == "structural"
        assert result.blocks[0] == ContentBlock.heading(1, "How plants drink water")
        assert len(result.blocks) == 4

    def test_noise_div_measured_by_its_own_text(self, make_soup):
        ad = "Sponsored: a long promotional sentence that easily passes fifty characters"
        node = _node(
            make_soup,
            f"<div class='ads'>{ad}<span class='ads'> nested ad</span></div>",
        )
        assert structural_blocks(node) == [ContentBlock.paragraph(ad)]

    def test_never_emits_short_blocks(self, article_html, make_soup):
        node = make_soup(article_html).find("article")
        blocks = structural_blocks(node)
        assert blocks
        assert all(len(b.text) >= 10 for b in blocks)

    def test_custom_thresholds(self, make_soup):
        node = _node(make_soup, "<p>short</p><div>a div of medium size</div>")
        profile = ExtractionProfile(min_block_chars=3, min_div_paragraph_chars=5)
        assert [b.text for b in structural_blocks(node, profile)] == [
            "short",
            "a div of medium size",
        ]


class TestSentenceBlocks:
    def test_split_into_paragraphs(self, make_soup):
        node = _node(
            make_soup,
            "<h1>Heading text is lost here</h1>"
            "<span>First sentence of the body text. Second sentence of the body text!</span>",
        )
        blocks = sentence_blocks(node)
        assert all(b.kind is BlockKind.PARAGRAPH for b in blocks)
        assert [b.text for b in blocks] == [
            "Heading text is lost hereFirst sentence of the body text",
            "Second sentence of the body text",
        ]


class TestSegmentBlocks:
    def test_structural_when_enough_blocks(self, article_html, make_soup):
        node = make_soup(article_html).find("article")
        result = segment_blocks(node)
        assert result.method == "structural"
        assert [(b.kind, b.level) for b in result.blocks] == [
            (BlockKind.HEADING, 1),
            (BlockKind.PARAGRAPH, None),
            (BlockKind.HEADING, 2),
            (BlockKind.PARAGRAPH, None),
            (BlockKind.PARAGRAPH, None),
        ]
        assert result.blocks[3].text == (
            "Water climbs the stem through narrow tubes called xylem, "
            "pulled upward as the leaves lose moisture."
        )
        assert not any("fertiliser" in b.text for b in result.blocks)

    def test_short_heading_article_uses_sentences(self, make_soup):
        node = _node(make_soup, f"<h1>Intro</h1><p>Short.</p><p>{FILLER}</p>")
        result = segment_blocks(node)
        assert result.method == "sentences"
        assert result.blocks == (ContentBlock.paragraph(FILLER),)

    def test_fallback_has_no_headings(self, make_soup):
        node = _node(
            make_soup,
            "<h2>A heading long enough</h2>"
            "<p>Only one paragraph here, but it has two sentences. See, the second one.</p>",
        )
        result = segment_blocks(node)
        assert result.method == "sentences"
        assert all(b.kind is BlockKind.PARAGRAPH for b in result.blocks)
        assert all(b.level is None for b in result.blocks)

    def test_div_soup_fixture_falls_back(self, div_soup_html, make_soup):
        node = make_soup(div_soup_html).find("div", class_="wrapper")
        result = segment_blocks(node)
        assert result.method == "sentences"
        assert [b.text for b in result.blocks] == [
            "The village fete raised more money than ever before this year, "
            "thanks to volunteers",
            "Organisers thanked the bakers, the brass band and everyone who "
            "ran a stall on the green",
        ]

    def test_three_blocks_is_enough(self, make_soup):
        node = _node(
            make_soup,
            "<p>First paragraph text.</p><p>Second paragraph text.</p><p>Third paragraph.</p>",
        )
        result = segment_blocks(node)
        assert result.method == "structural"
        assert len(result.blocks) == 3

    def test_nothing_readable_raises(self, make_soup):
        node = _node(make_soup, "<p>Hi</p><p>Too short.</p>")
        with pytest.raises(SegmentationFailure) as exc_info:
            segment_blocks(node, url="https://example.com/empty")
        assert exc_info.value.url == "https://example.com/empty"

    def test_empty_node_raises(self, make_soup):
        with pytest.raises(SegmentationFailure):
            segment_blocks(_node(make_soup, ""))
