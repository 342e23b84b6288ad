from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings


settings.register_profile(
    "ci_smoke",
    max_examples=30,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.register_profile(
    "nightly_deep",
    max_examples=300,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci_smoke"))


def _write_doc(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def write_doc():
    return _write_doc


@pytest.fixture()
def docs_root(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    _write_doc(
        root,
        "index.md",
        "# Docs Home\n\nSee the [guide](./guides/setup.md) and [api](./reference/).\n",
    )
    _write_doc(
        root,
        "guides/setup.md",
        "# Setup\n\n## Install the `cli` **tool**\n\nBack to [home](../index.md#docs-home).\n",
    )
    _write_doc(
        root,
        "reference/index.md",
        "# Reference\n\n## Options\n\nRead [setup](../guides/setup#install-the-tool).\n",
    )
    _write_doc(root, "reference/options.md", "# Options\n")
    return root
