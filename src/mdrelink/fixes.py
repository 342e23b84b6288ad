from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Literal

from mdrelink.config.models import DEFAULT_DOCUMENT_EXTENSION
from mdrelink.index import FilenameIndex
from mdrelink.links import split_href

FixStatus = Literal["auto-fixable", "ambiguous", "not-found"]

NOT_FOUND_MESSAGE = "File not found anywhere"


@dataclass(frozen=True, slots=True)
class FixSuggestion:
    status: FixStatus
    message: str | None = None
    suggested_fix: str | None = None
    found_at: str | None = None
    candidates: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.status == "auto-fixable" and not self.suggested_fix:
            raise ValueError("auto-fixable suggestions require a suggested_fix")


def target_filename(link_path: str, extension: str = DEFAULT_DOCUMENT_EXTENSION) -> str:
    name = PurePosixPath(link_path).name
    if not name.endswith(extension):
        name += extension
    return name


def relative_href(source: Path, target: Path) -> str:
    """Relative href from ``source``'s directory to ``target``, always ./ or ../ led."""
    relative = os.path.relpath(target, source.parent).replace(os.sep, "/")
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative


def display_path(path: Path, scan_root: Path) -> str:
    return os.path.relpath(path, scan_root).replace(os.sep, "/")


def suggest_fix(
    source: Path,
    href: str,
    index: FilenameIndex,
    *,
    scan_root: Path,
    extension: str = DEFAULT_DOCUMENT_EXTENSION,
) -> FixSuggestion:
    """Propose a replacement for an unresolved ``href`` using the filename index.

    Only a single same-named document is trusted; several candidates are
    reported as ambiguous and never rewritten.
    """
    parts = split_href(href)
    filename = target_filename(parts.path, extension)
    candidates = index.candidates(filename)

    if not candidates:
        return FixSuggestion(status="not-found", message=NOT_FOUND_MESSAGE)

    if len(candidates) == 1:
        candidate = candidates[0]
        return FixSuggestion(
            status="auto-fixable",
            suggested_fix=relative_href(source, candidate) + parts.anchor_suffix,
            found_at=display_path(candidate, scan_root),
        )

    return FixSuggestion(
        status="ambiguous",
        message=f'Multiple files named "{filename}"',
        candidates=tuple(display_path(candidate, scan_root) for candidate in candidates),
    )
