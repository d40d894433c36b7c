"""Extraction profiles: per-site tuning loaded from YAML.

A profile file looks like::

    default:
      min_block_chars: 10
    domains:
      example.com:
        extra_content_selectors: [".story"]
        extra_noise_classes: ["promo"]

The longest ``domains`` key matching the URL's host (exact or subdomain)
is merged over ``default``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ConfigDict, Field

from easyread import settings


class ExtractionProfile(BaseModel):
    """Thresholds and selector lists used by every extraction stage."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    content_selectors: tuple[str, ...] = settings.CONTENT_SELECTORS
    noise_tags: tuple[str, ...] = settings.NOISE_TAGS
    noise_roles: tuple[str, ...] = settings.NOISE_ROLES
    noise_classes: tuple[str, ...] = settings.NOISE_CLASSES

    # Appended to the lists above rather than replacing them
    extra_content_selectors: tuple[str, ...] = ()
    extra_noise_classes: tuple[str, ...] = ()

    min_block_chars: int = Field(default=settings.MIN_BLOCK_CHARS, ge=0)
    min_div_paragraph_chars: int = Field(default=settings.MIN_DIV_PARAGRAPH_CHARS, ge=0)
    min_structured_blocks: int = Field(default=settings.MIN_STRUCTURED_BLOCKS, ge=0)
    min_sentence_chars: int = Field(default=settings.MIN_SENTENCE_CHARS, ge=0)

    untitled: str = Field(default=settings.UNTITLED, min_length=1)

    @property
    def all_content_selectors(self) -> tuple[str, ...]:
        return self.content_selectors + self.extra_content_selectors

    @property
    def all_noise_classes(self) -> frozenset[str]:
        return frozenset(c.lower() for c in self.noise_classes + self.extra_noise_classes)


DEFAULT_PROFILE = ExtractionProfile()


def _match_domain(domains: dict[str, Any], url: str) -> dict[str, Any]:
    netloc = urlparse(url).netloc.lower()
    best_key = ""
    best_cfg: dict[str, Any] = {}
    for key, cfg in domains.items():
        if not isinstance(key, str) or not isinstance(cfg, dict):
            continue
        key_lower = key.lower()
        if (netloc == key_lower or netloc.endswith("." + key_lower)) and (
            len(key_lower) > len(best_key)
        ):
            best_key = key_lower
            best_cfg = cfg
    return best_cfg


def load_profile(path: str | Path, url: str = "") -> ExtractionProfile:
    """Load the YAML profile at *path* and return the profile for *url*.

    Raises:
        FileNotFoundError: if *path* does not exist.
        pydantic.ValidationError: if a merged value has the wrong type.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    default = data.get("default", {}) if isinstance(data, dict) else {}
    domains = data.get("domains", {}) if isinstance(data, dict) else {}

    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    if url and isinstance(domains, dict):
        merged.update(_match_domain(domains, url))
    return ExtractionProfile(**merged)
