from __future__ import annotations

import logging
import os
from pathlib import Path

from mdrelink.anchors import AnchorCache
from mdrelink.config.models import (
    DEFAULT_DOCUMENT_EXTENSION,
    DEFAULT_INDEX_DOCUMENT,
    LinkCheckConfig,
)
from mdrelink.diagnostics import LinkIssue
from mdrelink.fixes import display_path, suggest_fix
from mdrelink.index import FilenameIndex
from mdrelink.links import LinkToken, extract_links, is_asset_link

LOGGER = logging.getLogger(__name__)


def resolve_link_path(source: Path, link_path: str) -> Path:
    """Resolve ``link_path`` against the directory holding ``source``.

    Normalisation is lexical; symlinks are left as they are.
    """
    return Path(os.path.normpath(os.path.join(source.parent, link_path)))


def find_target(
    resolved: Path,
    link_path: str,
    *,
    extension: str = DEFAULT_DOCUMENT_EXTENSION,
    index_document: str = DEFAULT_INDEX_DOCUMENT,
) -> Path | None:
    """Locate the document a resolved link points at, or ``None``.

    Tried in order: the exact file, the path with ``extension`` appended,
    the index document of a ``/``-terminated directory link, and the index
    document of an extensionless directory path.
    """
    if resolved.is_file():
        return resolved

    has_extension = link_path.endswith(extension)
    if not has_extension:
        with_extension = Path(f"{resolved}{extension}")
        if with_extension.is_file():
            return with_extension

    if link_path.endswith("/"):
        index_path = resolved / index_document
        if index_path.is_file():
            return index_path

    if not has_extension and resolved.is_dir():
        index_path = resolved / index_document
        if index_path.is_file():
            return index_path

    return None


def _anchors_or_empty(cache: AnchorCache, target: Path) -> tuple[str, ...]:
    try:
        return cache.anchors_for(target)
    except OSError as exc:
        LOGGER.warning("Cannot read headings from %s: %s", target, exc)
        return ()


def validate_link(
    source: Path,
    token: LinkToken,
    index: FilenameIndex,
    *,
    scan_root: Path,
    config: LinkCheckConfig,
    anchor_cache: AnchorCache,
) -> LinkIssue | None:
    parts = token.parts
    if is_asset_link(parts.path, config.asset_extensions):
        return None

    resolved = resolve_link_path(source, parts.path)
    target = find_target(
        resolved,
        parts.path,
        extension=config.document_extension,
        index_document=config.index_document,
    )

    if target is None:
        fix = suggest_fix(
            source,
            token.href,
            index,
            scan_root=scan_root,
            extension=config.document_extension,
        )
        return LinkIssue(
            kind="broken-link",
            status=fix.status,
            source=source,
            line=token.line,
            link_text=token.text,
            href=token.href,
            link_path=parts.path,
            message=fix.message,
            resolved_to=str(resolved),
            suggested_fix=fix.suggested_fix,
            found_at=fix.found_at,
            candidates=fix.candidates,
        )

    if not parts.anchor:
        return None

    anchors = _anchors_or_empty(anchor_cache, target)
    if parts.anchor in anchors:
        return None
    return LinkIssue(
        kind="broken-anchor",
        status="manual",
        source=source,
        line=token.line,
        link_text=token.text,
        href=token.href,
        link_path=parts.path,
        message=f'Anchor "#{parts.anchor}" not found in {display_path(target, scan_root)}',
        anchor=parts.anchor,
        target_file=display_path(target, scan_root),
        available_anchors=anchors[: config.max_anchor_samples],
    )


def validate_document(
    source: Path,
    content: str,
    index: FilenameIndex,
    *,
    scan_root: Path,
    config: LinkCheckConfig | None = None,
    anchor_cache: AnchorCache | None = None,
) -> list[LinkIssue]:
    """Return the link issues of one document, in link order.

    ``content`` is the raw text of ``source``; the index is consulted only
    to suggest fixes for links that do not resolve.
    """
    cfg = config if config is not None else LinkCheckConfig()
    cache = anchor_cache if anchor_cache is not None else AnchorCache()
    issues: list[LinkIssue] = []
    for token in extract_links(content):
        issue = validate_link(
            source,
            token,
            index,
            scan_root=scan_root,
            config=cfg,
            anchor_cache=cache,
        )
        if issue is not None:
            issues.append(issue)
    return issues
