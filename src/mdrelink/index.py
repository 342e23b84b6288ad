from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class FilenameIndex:
    """Read-only lookup of document paths by base filename."""

    _entries: Mapping[str, tuple[Path, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self._entries, MappingProxyType):
            object.__setattr__(self, "_entries", MappingProxyType(dict(self._entries)))

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "FilenameIndex":
        grouped: dict[str, list[Path]] = {}
        for path in paths:
            grouped.setdefault(path.name, []).append(path)
        return cls(_entries={name: tuple(items) for name, items in grouped.items()})

    def candidates(self, filename: str) -> tuple[Path, ...]:
        return self._entries.get(filename, ())

    def __len__(self) -> int:
        return len(self._entries)

    def document_count(self) -> int:
        return sum(len(items) for items in self._entries.values())


def build_filename_index(paths: Iterable[Path]) -> FilenameIndex:
    return FilenameIndex.from_paths(paths)
