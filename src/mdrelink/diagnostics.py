from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

IssueKind = Literal["broken-link", "broken-anchor"]
IssueStatus = Literal["auto-fixable", "ambiguous", "not-found", "manual"]
IssueCategory = Literal["auto-fixable", "ambiguous", "not-found", "broken-anchor"]

ISSUE_CATEGORIES: tuple[IssueCategory, ...] = (
    "auto-fixable",
    "ambiguous",
    "not-found",
    "broken-anchor",
)


@dataclass(frozen=True, slots=True)
class LinkIssue:
    kind: IssueKind
    status: IssueStatus
    source: Path
    line: int
    link_text: str
    href: str
    link_path: str
    message: str | None = None
    resolved_to: str | None = None
    suggested_fix: str | None = None
    found_at: str | None = None
    candidates: tuple[str, ...] = ()
    anchor: str | None = None
    target_file: str | None = None
    available_anchors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("line must be >= 1")
        if self.kind == "broken-link" and self.status == "manual":
            raise ValueError("broken-link issues must be auto-fixable, ambiguous or not-found")
        if self.kind == "broken-anchor":
            if self.status != "manual":
                raise ValueError("broken-anchor issues are always manual")
            if not self.anchor:
                raise ValueError("broken-anchor issues require an anchor")
        if self.status == "auto-fixable" and not self.suggested_fix:
            raise ValueError("auto-fixable issues require a suggested_fix")

    @property
    def category(self) -> IssueCategory:
        if self.kind == "broken-anchor":
            return "broken-anchor"
        return self.status  # type: ignore[return-value]

    @property
    def is_auto_fixable(self) -> bool:
        return self.status == "auto-fixable"

    @property
    def original_markdown(self) -> str:
        return f"[{self.link_text}]({self.href})"

    @property
    def fixed_markdown(self) -> str | None:
        if self.suggested_fix is None:
            return None
        return f"[{self.link_text}]({self.suggested_fix})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.kind,
            "status": self.status,
            "line": int(self.line),
            "link_text": self.link_text,
            "href": self.href,
            "link_path": self.link_path,
        }
        if self.kind == "broken-link":
            payload["resolved_to"] = self.resolved_to
            payload["message"] = self.message
            if self.suggested_fix is not None:
                payload["suggested_fix"] = self.suggested_fix
                payload["found_at"] = self.found_at
            if self.candidates:
                payload["candidates"] = list(self.candidates)
        else:
            payload["anchor"] = self.anchor
            payload["target_file"] = self.target_file
            payload["available_anchors"] = list(self.available_anchors)
        return payload


@dataclass(frozen=True, slots=True)
class FileIssues:
    path: Path
    relative_path: str
    issues: tuple[LinkIssue, ...] = ()

    def auto_fixable(self) -> tuple[LinkIssue, ...]:
        return tuple(issue for issue in self.issues if issue.is_auto_fixable)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.relative_path,
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True, slots=True)
class IssueCounts:
    auto_fixable: int = 0
    ambiguous: int = 0
    not_found: int = 0
    broken_anchors: int = 0

    @classmethod
    def from_issues(cls, issues: tuple[LinkIssue, ...] | list[LinkIssue]) -> "IssueCounts":
        tally = {category: 0 for category in ISSUE_CATEGORIES}
        for issue in issues:
            tally[issue.category] += 1
        return cls(
            auto_fixable=tally["auto-fixable"],
            ambiguous=tally["ambiguous"],
            not_found=tally["not-found"],
            broken_anchors=tally["broken-anchor"],
        )

    @property
    def total(self) -> int:
        return self.auto_fixable + self.ambiguous + self.not_found + self.broken_anchors

    def to_dict(self) -> dict[str, int]:
        return {
            "auto_fixable": int(self.auto_fixable),
            "ambiguous": int(self.ambiguous),
            "not_found": int(self.not_found),
            "broken_anchors": int(self.broken_anchors),
        }


@dataclass(frozen=True, slots=True)
class FileFailure:
    file: str
    detail: str

    def to_dict(self) -> dict[str, str]:
        return {"file": self.file, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class RunResult:
    root: Path
    write_mode: bool
    files_scanned: int
    file_issues: tuple[FileIssues, ...] = ()
    counts: IssueCounts = field(default_factory=IssueCounts)
    fixes_applied: int = 0
    write_failures: tuple[FileFailure, ...] = ()
    read_failures: tuple[FileFailure, ...] = ()

    @property
    def total_issues(self) -> int:
        return self.counts.total

    @property
    def files_with_issues(self) -> int:
        return len(self.file_issues)

    @property
    def remaining_issues(self) -> int:
        if self.write_mode:
            return self.total_issues - self.fixes_applied
        return self.total_issues

    @property
    def ok(self) -> bool:
        return self.remaining_issues == 0 and not self.read_failures

    def issues(self) -> tuple[LinkIssue, ...]:
        return tuple(issue for entry in self.file_issues for issue in entry.issues)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "target_dir": str(self.root),
            "write_mode": self.write_mode,
            "files": int(self.files_scanned),
            "files_with_issues": self.files_with_issues,
            "total_issues": self.total_issues,
            "remaining_issues": self.remaining_issues,
            "counts": self.counts.to_dict(),
            "fixes_applied": int(self.fixes_applied),
            "file_issues": [entry.to_dict() for entry in self.file_issues],
        }
        if self.write_failures:
            payload["write_failures"] = [item.to_dict() for item in self.write_failures]
        if self.read_failures:
            payload["read_failures"] = [item.to_dict() for item in self.read_failures]
        return payload
