from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from mdrelink.config.models import DEFAULT_DOCUMENT_EXTENSION, DEFAULT_IGNORE_PREFIXES

LOGGER = logging.getLogger(__name__)


def is_ignored_name(name: str, ignore_prefixes: Iterable[str] = DEFAULT_IGNORE_PREFIXES) -> bool:
    return any(name.startswith(prefix) for prefix in ignore_prefixes)


def discover_documents(
    root: str | Path,
    *,
    extension: str = DEFAULT_DOCUMENT_EXTENSION,
    ignore_prefixes: Iterable[str] = DEFAULT_IGNORE_PREFIXES,
) -> list[Path]:
    """Return every document under ``root`` in deterministic walk order.

    Entries are visited in name order, descending into each directory where it
    appears. Files and directories whose name starts with one of
    ``ignore_prefixes`` are skipped along with everything beneath them.
    Symlinks are not followed and unreadable directories are skipped.
    """
    prefixes = tuple(ignore_prefixes)
    start = Path(root).expanduser().absolute()
    documents: list[Path] = []

    def _walk(directory: Path) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)
            return

        for entry in entries:
            if is_ignored_name(entry.name, prefixes):
                continue
            path = directory / entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as exc:
                LOGGER.debug("Skipping unreadable entry %s: %s", path, exc)
                continue
            if is_dir:
                _walk(path)
            elif is_file and entry.name.endswith(extension):
                documents.append(path)

    _walk(start)
    LOGGER.debug("Discovered %d documents under %s", len(documents), start)
    return documents
