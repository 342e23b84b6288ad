from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mdrelink.anchors import AnchorCache
from mdrelink.config import LinkCheckConfig, load_check_config
from mdrelink.diagnostics import FileFailure, FileIssues, IssueCounts, LinkIssue, RunResult
from mdrelink.discovery import discover_documents
from mdrelink.errors import FixWriteError, ScanRootNotFoundError
from mdrelink.fixes import display_path
from mdrelink.index import build_filename_index
from mdrelink.resolver import validate_document

LOGGER = logging.getLogger(__name__)


def applicable_fixes(content: str, issues: Iterable[LinkIssue]) -> tuple[LinkIssue, ...]:
    """Auto-fixable issues whose exact ``[text](href)`` occurs in ``content``.

    Link text is read from code-stripped content, so a token spanning an
    inline code run may not appear verbatim in the raw text.
    """
    return tuple(
        issue
        for issue in issues
        if issue.is_auto_fixable and issue.original_markdown in content
    )


def apply_fixes(content: str, issues: Iterable[LinkIssue]) -> str:
    """Rewrite every exact ``[text](href)`` of each auto-fixable issue."""
    updated = content
    for issue in issues:
        replacement = issue.fixed_markdown
        if not issue.is_auto_fixable or replacement is None:
            continue
        updated = updated.replace(issue.original_markdown, replacement)
    return updated


def write_fixes(path: Path, content: str, issues: Iterable[LinkIssue]) -> None:
    updated = apply_fixes(content, issues)
    if updated == content:
        return
    try:
        # newline="" keeps the original line endings untouched.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)
    except OSError as exc:
        raise FixWriteError(path=path, detail=str(exc)) from exc


@dataclass(frozen=True, slots=True)
class LinkCheckRuntime:
    config: LinkCheckConfig
    root: Path

    @classmethod
    def from_configs(
        cls,
        config_path: str | Path | None = None,
        scope: str | Path | None = None,
    ) -> "LinkCheckRuntime":
        config = load_check_config(config_path)
        root = Path(scope).expanduser().resolve() if scope is not None else config.root
        if not root.is_dir():
            raise ScanRootNotFoundError(root)
        return cls(config=config, root=root)

    def run(self, *, write: bool = False) -> RunResult:
        if not self.root.is_dir():
            raise ScanRootNotFoundError(self.root)

        documents = discover_documents(
            self.root,
            extension=self.config.document_extension,
            ignore_prefixes=self.config.ignore_prefixes,
        )
        index = build_filename_index(documents)
        LOGGER.debug(
            "Indexed %d document(s) under %d filename(s)",
            index.document_count(),
            len(index),
        )
        anchor_cache = AnchorCache()

        file_issues: list[FileIssues] = []
        all_issues: list[LinkIssue] = []
        write_failures: list[FileFailure] = []
        read_failures: list[FileFailure] = []
        fixes_applied = 0

        for path in documents:
            relative = display_path(path, self.root)
            # Raw text, newline="" so a rewrite reproduces untouched bytes.
            try:
                with path.open("r", encoding="utf-8", newline="") as handle:
                    content = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                LOGGER.warning("Cannot read %s: %s", path, exc)
                read_failures.append(FileFailure(file=relative, detail=str(exc)))
                continue
            issues = validate_document(
                path,
                content,
                index,
                scan_root=self.root,
                config=self.config,
                anchor_cache=anchor_cache,
            )
            LOGGER.debug("Checked %s: %d issue(s)", relative, len(issues))
            if not issues:
                continue

            entry = FileIssues(path=path, relative_path=relative, issues=tuple(issues))
            file_issues.append(entry)
            all_issues.extend(issues)

            if not write:
                continue
            fixable = applicable_fixes(content, entry.auto_fixable())
            skipped = len(entry.auto_fixable()) - len(fixable)
            if skipped:
                LOGGER.warning(
                    "%d auto-fixable link(s) in %s do not appear verbatim; left unchanged",
                    skipped,
                    relative,
                )
            if not fixable:
                continue
            try:
                write_fixes(path, content, fixable)
            except FixWriteError as exc:
                LOGGER.warning("%s", exc)
                write_failures.append(FileFailure(file=relative, detail=exc.detail))
                continue
            fixes_applied += len(fixable)
            LOGGER.info("Fixed %d link(s) in %s", len(fixable), relative)

        result = RunResult(
            root=self.root,
            write_mode=write,
            files_scanned=len(documents),
            file_issues=tuple(file_issues),
            counts=IssueCounts.from_issues(all_issues),
            fixes_applied=fixes_applied,
            write_failures=tuple(write_failures),
            read_failures=tuple(read_failures),
        )
        LOGGER.info(
            "Scanned %d file(s) under %s: %d issue(s), %d remaining",
            result.files_scanned,
            self.root,
            result.total_issues,
            result.remaining_issues,
        )
        return result


def check_links(
    root: str | Path,
    *,
    write: bool = False,
    config: LinkCheckConfig | None = None,
) -> RunResult:
    """Validate (and optionally fix) the relative links under ``root``."""
    cfg = config if config is not None else LinkCheckConfig()
    scan_root = Path(root).expanduser().resolve()
    if not scan_root.is_dir():
        raise ScanRootNotFoundError(scan_root)
    return LinkCheckRuntime(config=cfg, root=scan_root).run(write=write)
