from __future__ import annotations

from mdrelink.config.loaders import load_check_config
from mdrelink.config.models import (
    DEFAULT_ASSET_EXTENSIONS,
    DEFAULT_DOCUMENT_EXTENSION,
    DEFAULT_IGNORE_PREFIXES,
    DEFAULT_INDEX_DOCUMENT,
    DEFAULT_MAX_ANCHOR_SAMPLES,
    LinkCheckConfig,
)

__all__ = [
    "DEFAULT_ASSET_EXTENSIONS",
    "DEFAULT_DOCUMENT_EXTENSION",
    "DEFAULT_IGNORE_PREFIXES",
    "DEFAULT_INDEX_DOCUMENT",
    "DEFAULT_MAX_ANCHOR_SAMPLES",
    "LinkCheckConfig",
    "load_check_config",
]
