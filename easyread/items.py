"""Pydantic schemas for extracted reading documents."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from easyread import settings


class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"


class ContentBlock(BaseModel):
    """One heading or paragraph of the reading view."""

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    level: int | None = Field(default=None, ge=1, le=6)
    text: str = Field(min_length=1)

    @model_validator(mode="after")
    def check_level(self) -> ContentBlock:
        if self.kind is BlockKind.HEADING and self.level is None:
            raise ValueError("heading blocks need a level")
        if self.kind is BlockKind.PARAGRAPH and self.level is not None:
            raise ValueError("paragraph blocks take no level")
        return self

    @classmethod
    def heading(cls, level: int, text: str) -> ContentBlock:
        return cls(kind=BlockKind.HEADING, level=max(1, min(6, level)), text=text)

    @classmethod
    def paragraph(cls, text: str) -> ContentBlock:
        return cls(kind=BlockKind.PARAGRAPH, text=text)


class ExtractedDocument(BaseModel):
    """Canonical output of the extraction pipeline."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    blocks: tuple[ContentBlock, ...] = Field(min_length=1)
    source_url: str = ""

    # Provenance
    extraction_method: str = "structural"   # "structural" | "sentences"
    content_strategy: str = ""              # locator strategy that won

    @field_validator("source_url", mode="before")
    @classmethod
    def strip_url(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    # ------------------------------------------------------------------
    # Representations handed to display / speech / print / copy consumers
    # ------------------------------------------------------------------

    @property
    def word_count(self) -> int:
        return sum(len(b.text.split()) for b in self.blocks)

    @property
    def reading_time_minutes(self) -> int:
        return max(1, math.ceil(self.word_count / settings.WORDS_PER_MINUTE))

    def to_text(self) -> str:
        """Title and block texts separated by blank lines."""
        return "\n\n".join([self.title, *(b.text for b in self.blocks)])

    def to_speech_text(self) -> str:
        """Single utterance: title and block texts joined as sentences."""
        return ". ".join([self.title, *(b.text for b in self.blocks)])

    def to_markdown(self) -> str:
        lines = [f"# {self.title}"]
        for block in self.blocks:
            if block.kind is BlockKind.HEADING:
                lines.append(f"{'#' * (block.level or 1)} {block.text}")
            else:
                lines.append(block.text)
        return "\n\n".join(lines) + "\n"
