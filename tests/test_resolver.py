from __future__ import annotations

from pathlib import Path

from mdrelink.anchors import AnchorCache
from mdrelink.config import LinkCheckConfig
from mdrelink.discovery import discover_documents
from mdrelink.index import build_filename_index
from mdrelink.resolver import find_target, resolve_link_path, validate_document


def _validate(root: Path, relative: str, **kwargs):
    source = root / relative
    index = build_filename_index(discover_documents(root))
    return validate_document(
        source,
        source.read_text(encoding="utf-8"),
        index,
        scan_root=root,
        **kwargs,
    )


def test_valid_tree_has_no_issues(docs_root: Path) -> None:
    for path in discover_documents(docs_root):
        assert _validate(docs_root, path.relative_to(docs_root).as_posix()) == []


def test_resolve_link_path_is_relative_to_source_directory(docs_root: Path) -> None:
    source = docs_root / "guides" / "setup.md"
    assert resolve_link_path(source, "../index.md") == docs_root / "index.md"
    assert resolve_link_path(source, "./deeper/../x.md") == docs_root / "guides" / "x.md"


def test_find_target_order(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "topic.md", "# Topic file\n")
    write_doc(docs_root, "topic/index.md", "# Topic dir\n")

    # extensionless prefers the sibling document over the directory index
    assert find_target(docs_root / "topic", "./topic") == docs_root / "topic.md"
    # trailing slash on a link still finds the sibling first, as the
    # extension is tried before the directory index
    assert find_target(docs_root / "topic", "./topic/") == docs_root / "topic.md"
    assert find_target(docs_root / "reference", "./reference/") == docs_root / "reference/index.md"
    assert find_target(docs_root / "reference", "./reference") == docs_root / "reference/index.md"
    assert find_target(docs_root / "index.md", "./index.md") == docs_root / "index.md"
    assert find_target(docs_root / "guides", "./guides") is None
    assert find_target(docs_root / "nope.md", "./nope.md") is None


def test_directory_with_document_extension_is_not_searched(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "odd.md/index.md", "# Odd\n")
    assert find_target(docs_root / "odd.md", "./odd.md") is None


def test_broken_link_not_found(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "page.md", "# Page\n\nSee [X](./missing.md).\n")
    issues = _validate(docs_root, "page.md")
    assert len(issues) == 1
    issue = issues[0]
    assert issue.kind == "broken-link"
    assert issue.category == "not-found"
    assert issue.line == 3
    assert issue.href == "./missing.md"
    assert issue.resolved_to == str(docs_root / "missing.md")
    assert issue.source == docs_root / "page.md"


def test_broken_link_auto_fixable(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "guides/page.md", "[Opts](./options.md#options)\n")
    (issue,) = _validate(docs_root, "guides/page.md")
    assert issue.category == "auto-fixable"
    assert issue.suggested_fix == "../reference/options.md#options"
    assert issue.found_at == "reference/options.md"


def test_broken_link_ambiguous(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "page.md", "[Ref](./sub/index.md)\n")
    (issue,) = _validate(docs_root, "page.md")
    assert issue.category == "ambiguous"
    assert issue.candidates == ("index.md", "reference/index.md")
    assert issue.suggested_fix is None


def test_broken_anchor_lists_samples(docs_root: Path, write_doc) -> None:
    write_doc(
        docs_root,
        "many.md",
        "".join(f"## Heading {n}\n" for n in range(8)),
    )
    write_doc(docs_root, "page.md", "[X](./many.md#nonexistent-heading)\n")
    (issue,) = _validate(docs_root, "page.md")
    assert issue.kind == "broken-anchor"
    assert issue.category == "broken-anchor"
    assert issue.anchor == "nonexistent-heading"
    assert issue.target_file == "many.md"
    assert issue.available_anchors == tuple(f"heading-{n}" for n in range(5))


def test_anchor_samples_follow_config(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "page.md", "[X](./reference/index.md#nope)\n")
    config = LinkCheckConfig(max_anchor_samples=1)
    (issue,) = _validate(docs_root, "page.md", config=config)
    assert issue.available_anchors == ("reference",)


def test_anchor_on_extensionless_and_directory_links(docs_root: Path, write_doc) -> None:
    write_doc(
        docs_root,
        "page.md",
        "[a](./reference#options)\n[b](./reference/#missing)\n[c](./guides/setup#setup)\n",
    )
    issues = _validate(docs_root, "page.md")
    assert [(issue.line, issue.category) for issue in issues] == [(2, "broken-anchor")]


def test_empty_anchor_is_not_checked(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "page.md", "[X](./index.md#)\n")
    assert _validate(docs_root, "page.md") == []


def test_asset_links_never_reported(docs_root: Path, write_doc) -> None:
    write_doc(
        docs_root,
        "page.md",
        "![logo](./missing.png)\n[zip](../nowhere/bundle.zip)\n[pdf](./a.PDF#page=2)\n",
    )
    assert _validate(docs_root, "page.md") == []


def test_links_in_code_blocks_are_ignored(docs_root: Path, write_doc) -> None:
    write_doc(
        docs_root,
        "page.md",
        "```\n[X](./missing.md)\n```\n",
    )
    assert _validate(docs_root, "page.md") == []


def test_anchor_cache_shared_across_documents(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "a.md", "[x](./index.md#docs-home)\n")
    write_doc(docs_root, "b.md", "[y](./index.md#docs-home)\n")
    cache = AnchorCache()
    assert _validate(docs_root, "a.md", anchor_cache=cache) == []
    assert _validate(docs_root, "b.md", anchor_cache=cache) == []
    assert len(cache) == 1


def test_resolution_uses_filesystem_not_discovery(docs_root: Path, write_doc) -> None:
    write_doc(docs_root, "_partials/snippet.md", "# Snippet\n")
    write_doc(docs_root, "page.md", "[s](./_partials/snippet.md#snippet)\n")
    assert _validate(docs_root, "page.md") == []


def test_find_target_defaults_follow_config_defaults(docs_root: Path) -> None:
    defaults = LinkCheckConfig()
    assert find_target(docs_root / "reference", "./reference") == docs_root / "reference" / defaults.index_document
    assert find_target(docs_root / "guides" / "setup", "./guides/setup") == (
        docs_root / "guides" / f"setup{defaults.document_extension}"
    )
