"""Heading anchor slugs.

Slugs follow the GitHub/Starlight style closely enough for relative docs:
markup is stripped from the heading text, then the text is lower-cased and
reduced to ASCII word characters joined by single hyphens.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

LOGGER = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^#{1,6}\s+(.+)$", re.MULTILINE)

_INLINE_CODE = re.compile(r"`[^`]+`")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")
_INLINE_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")

_EMOJI = re.compile("[\U0001F300-\U0001F9FF]")
# ASCII word characters only; whitespace stays Unicode-aware.
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def clean_heading_text(heading: str) -> str:
    text = heading.strip()
    text = _INLINE_CODE.sub("", text)
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    text = _INLINE_LINK.sub(r"\1", text)
    return text.strip()


def slugify(heading: str) -> str:
    text = heading.lower()
    text = _EMOJI.sub("", text)
    text = _NON_SLUG_CHARS.sub("", text)
    text = _WHITESPACE_RUN.sub("-", text)
    text = _HYPHEN_RUN.sub("-", text)
    return text.strip("-")


def heading_to_anchor(heading: str) -> str:
    return slugify(clean_heading_text(heading))


def extract_anchors(content: str) -> tuple[str, ...]:
    """Return the distinct anchor slugs of ``content`` in heading order."""
    anchors: dict[str, None] = {}
    for match in HEADING_PATTERN.finditer(content):
        anchors.setdefault(heading_to_anchor(match.group(1)), None)
    return tuple(anchors)


@dataclass(slots=True)
class AnchorCache:
    """Per-run memo of anchor slugs keyed by target document path."""

    _anchors: dict[Path, tuple[str, ...]] = field(default_factory=dict)

    def anchors_for(self, path: Path) -> tuple[str, ...]:
        cached = self._anchors.get(path)
        if cached is not None:
            return cached
        content = path.read_text(encoding="utf-8", errors="replace")
        anchors = extract_anchors(content)
        LOGGER.debug("Collected %d anchors from %s", len(anchors), path)
        self._anchors[path] = anchors
        return anchors

    def __len__(self) -> int:
        return len(self._anchors)
