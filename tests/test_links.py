from __future__ import annotations

import pytest

from mdrelink.links import (
    HrefParts,
    LinkToken,
    extract_links,
    is_asset_link,
    split_href,
    strip_code_blocks,
)


def test_extract_links_only_matches_relative_paths() -> None:
    content = (
        "[same dir](./a.md)\n"
        "[parent](../b.md#intro)\n"
        "[absolute](/c.md)\n"
        "[external](https://example.com/d.md)\n"
        "[bare](e.md)\n"
        "![image](./img/logo.png)\n"
    )
    tokens = extract_links(content)
    assert [(t.text, t.href, t.line) for t in tokens] == [
        ("same dir", "./a.md", 1),
        ("parent", "../b.md#intro", 2),
        ("image", "./img/logo.png", 6),
    ]


def test_extract_links_ignores_fenced_code_and_keeps_line_numbers() -> None:
    content = (
        "Intro\n"
        "```markdown\n"
        "[example](./inside-fence.md)\n"
        "```\n"
        "\n"
        "[real](./outside.md)\n"
    )
    tokens = extract_links(content)
    assert tokens == [LinkToken(text="real", href="./outside.md", line=6)]


def test_extract_links_allows_empty_link_text() -> None:
    assert extract_links("[](./empty.md)")[0].text == ""


def test_strip_code_blocks_preserves_newlines() -> None:
    content = "a\n```\nx\ny\n```\nb"
    stripped = strip_code_blocks(content)
    assert stripped.count("\n") == content.count("\n")
    assert "x" not in stripped


def test_unterminated_fence_is_left_alone() -> None:
    content = "```\n[still scanned](./a.md)\n"
    assert len(extract_links(content)) == 1


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("./a.md", HrefParts(path="./a.md")),
        ("./a.md#intro", HrefParts(path="./a.md", anchor="intro")),
        ("./a.md?plain=1", HrefParts(path="./a.md")),
        ("./a.md?plain=1#intro", HrefParts(path="./a.md", anchor="intro")),
        ("./a.md#intro?plain=1", HrefParts(path="./a.md", anchor="intro")),
        ("./a.md#", HrefParts(path="./a.md", anchor="")),
        ("../dir/", HrefParts(path="../dir/")),
    ],
)
def test_split_href(href: str, expected: HrefParts) -> None:
    assert split_href(href) == expected


def test_anchor_suffix() -> None:
    assert split_href("./a.md?q=1#sec").anchor_suffix == "#sec"
    assert split_href("./a.md?q=1").anchor_suffix == ""


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("./bundle.ZIP", True),
        ("./notes.txt", True),
        ("../paper.pdf", True),
        ("./img/photo.JPeg", True),
        ("./icon.svg", True),
        ("./guide.md", False),
        ("./guide", False),
    ],
)
def test_is_asset_link(path: str, expected: bool) -> None:
    assert is_asset_link(path) is expected


def test_link_token_rejects_non_positive_line() -> None:
    with pytest.raises(ValueError):
        LinkToken(text="x", href="./x.md", line=0)


def test_link_token_markdown_round_trips_source_text() -> None:
    token = extract_links("see [the docs](../docs/index.md#top) here")[0]
    assert token.markdown == "[the docs](../docs/index.md#top)"
    assert token.parts.anchor == "top"
