"""Noise stripping: scripts, styles, page chrome, ads and social widgets.

Nothing here mutates the tree it is given.  :func:`visible_text` walks the
subtree and leaves noise descendants out of the text it collects.  The root
element itself is never treated as noise, only its descendants, so an
element that is itself noise still reports the rest of its own text.
"""

from __future__ import annotations

from bs4 import Tag
from bs4.element import NavigableString, PreformattedString

from easyread.profiles import DEFAULT_PROFILE, ExtractionProfile


def _tokens(val: object) -> list[str]:
    """Split a BeautifulSoup attribute value (str | list | None) into tokens."""
    if val is None:
        return []
    if isinstance(val, list):
        return [str(v).lower() for v in val]
    return str(val).lower().split()


def is_noise(tag: Tag, profile: ExtractionProfile = DEFAULT_PROFILE) -> bool:
    """Return True if *tag* is a non-content element.

    Class markers are compared against whole class tokens, the way a
    ``.ads`` CSS selector matches: ``class="ads"`` is noise,
    ``class="downloads"`` is not.
    """
    if tag.name in profile.noise_tags:
        return True
    if any(role in profile.noise_roles for role in _tokens(tag.get("role"))):
        return True
    markers = profile.all_noise_classes
    return any(cls in markers for cls in _tokens(tag.get("class")))


def visible_text(root: Tag, profile: ExtractionProfile = DEFAULT_PROFILE) -> str:
    """Concatenate the text of *root*, leaving out noise subtrees and comments."""
    parts: list[str] = []
    stack: list[object] = list(reversed(list(root.children)))
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if is_noise(node, profile):
                continue
            stack.extend(reversed(list(node.children)))
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))
    return "".join(parts)
