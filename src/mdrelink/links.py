from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from mdrelink.config.models import DEFAULT_ASSET_EXTENSIONS

# [text](./path) or [text](../path); never /absolute or scheme://
RELATIVE_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\((\.\.?/[^)]+)\)")
FENCED_CODE_PATTERN = re.compile(r"```[\s\S]*?```")


@dataclass(frozen=True, slots=True)
class HrefParts:
    path: str
    anchor: str | None = None

    @property
    def anchor_suffix(self) -> str:
        return f"#{self.anchor}" if self.anchor is not None else ""


@dataclass(frozen=True, slots=True)
class LinkToken:
    text: str
    href: str
    line: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("line must be >= 1")

    @property
    def markdown(self) -> str:
        return f"[{self.text}]({self.href})"

    @property
    def parts(self) -> HrefParts:
        return split_href(self.href)


def strip_code_blocks(content: str) -> str:
    """Blank out fenced code blocks, keeping their newlines so line numbers hold."""
    return FENCED_CODE_PATTERN.sub(lambda match: "\n" * match.group(0).count("\n"), content)


def split_href(href: str) -> HrefParts:
    """Split ``href`` into its path and anchor.

    The path ends at the first ``#`` or ``?``. The anchor is whatever follows
    the first ``#`` up to a later ``?``; any query is dropped.
    """
    path, sep, fragment = href.partition("#")
    path = path.partition("?")[0]
    anchor = fragment.partition("?")[0] if sep else None
    return HrefParts(path=path, anchor=anchor)


def is_asset_link(path: str, asset_extensions: Iterable[str] = DEFAULT_ASSET_EXTENSIONS) -> bool:
    lowered = path.lower()
    return any(lowered.endswith(extension) for extension in asset_extensions)


def extract_links(content: str) -> list[LinkToken]:
    """Return relative link tokens found outside fenced code blocks."""
    stripped = strip_code_blocks(content)
    tokens: list[LinkToken] = []
    for match in RELATIVE_LINK_PATTERN.finditer(stripped):
        line = stripped.count("\n", 0, match.start()) + 1
        tokens.append(LinkToken(text=match.group(1), href=match.group(2), line=line))
    return tokens
