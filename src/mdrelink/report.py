from __future__ import annotations

import json

from mdrelink.diagnostics import LinkIssue, RunResult

RULE_WIDTH = 60


def _issue_lines(issue: LinkIssue) -> list[str]:
    line = f"  Line {issue.line}:"
    if issue.kind == "broken-anchor":
        lines = [
            f"{line} [ANCHOR] {issue.href}",
            f'     Anchor "#{issue.anchor}" not found in {issue.target_file}',
        ]
        if issue.available_anchors:
            lines.append(f"     Available: {', '.join(issue.available_anchors)}")
        return lines
    if issue.status == "auto-fixable":
        return [f"{line} [FIX] {issue.href}", f"     -> {issue.suggested_fix}"]
    if issue.status == "ambiguous":
        lines = [f"{line} [AMBIGUOUS] {issue.href}", f"     {issue.message}:"]
        lines.extend(f"       - {candidate}" for candidate in issue.candidates)
        return lines
    return [f"{line} [MANUAL] {issue.href}", f"     {issue.message}"]


def format_console_report(result: RunResult) -> str:
    mode = "WRITE (applying fixes)" if result.write_mode else "DRY RUN (use --write to fix)"
    lines = [
        "",
        f"Validating relative links in: {result.root}",
        f"Mode: {mode}",
        f"Found {result.files_scanned} markdown files",
        "",
    ]

    if not result.file_issues and not result.read_failures:
        lines.append("All relative links are valid!")
        lines.append("")
        return "\n".join(lines)

    for entry in result.file_issues:
        lines.append("")
        lines.append(entry.relative_path)
        for issue in entry.issues:
            lines.extend(_issue_lines(issue))

    counts = result.counts
    lines.extend(
        [
            "",
            "─" * RULE_WIDTH,
            "",
            "Summary:",
            f"   Files scanned: {result.files_scanned}",
            f"   Files with issues: {result.files_with_issues}",
            f"   Total issues: {result.total_issues}",
            "",
            "   Breakdown:",
            f"     Auto-fixable:   {counts.auto_fixable}",
            f"     Ambiguous:      {counts.ambiguous}",
            f"     Not found:      {counts.not_found}",
            f"     Broken anchors: {counts.broken_anchors}",
        ]
    )

    for failure in result.read_failures:
        lines.append(f"   Unreadable: {failure.file} ({failure.detail})")
    for failure in result.write_failures:
        lines.append(f"   Write failed: {failure.file} ({failure.detail})")

    if result.write_mode and result.fixes_applied > 0:
        lines.append("")
        lines.append(f"   Fixed {result.fixes_applied} issue(s)")
    elif not result.write_mode and counts.auto_fixable > 0:
        lines.append("")
        lines.append(f"Run with --write to auto-fix {counts.auto_fixable} issue(s)")

    lines.append("")
    return "\n".join(lines)


def format_json_report(result: RunResult) -> str:
    return json.dumps(result.to_dict(), indent=2, sort_keys=True)
