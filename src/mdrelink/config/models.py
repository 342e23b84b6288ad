from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ROOT = Path("docs")
DEFAULT_DOCUMENT_EXTENSION = ".md"
DEFAULT_INDEX_DOCUMENT = "index.md"
DEFAULT_IGNORE_PREFIXES: tuple[str, ...] = ("_", ".")
DEFAULT_ASSET_EXTENSIONS: tuple[str, ...] = (
    ".zip",
    ".txt",
    ".pdf",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".webp",
    ".ico",
)
DEFAULT_MAX_ANCHOR_SAMPLES = 5


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


def _coerce_string_tuple(value: object, *, label: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, list):
        items = value
    elif isinstance(value, tuple):
        items = list(value)
    else:
        raise ValueError(f"{label} must be a list of non-empty strings")

    seen: set[str] = set()
    cleaned: list[str] = []
    for raw in items:
        if not isinstance(raw, str):
            raise ValueError(f"{label} entries must be strings")
        item = raw.strip()
        if not item:
            raise ValueError(f"{label} entries must be non-empty")
        if item in seen:
            continue
        seen.add(item)
        cleaned.append(item)
    return tuple(cleaned)


def _validate_extension(value: str, *, label: str) -> str:
    cleaned = value.strip()
    if len(cleaned) < 2 or not cleaned.startswith("."):
        raise ValueError(f"{label} must start with '.' followed by a suffix, got '{value}'")
    if "/" in cleaned or "\\" in cleaned:
        raise ValueError(f"{label} must not contain path separators")
    return cleaned


class LinkCheckConfig(StrictModel):
    root: Path = DEFAULT_ROOT
    document_extension: str = DEFAULT_DOCUMENT_EXTENSION
    index_document: str = DEFAULT_INDEX_DOCUMENT
    ignore_prefixes: tuple[str, ...] = DEFAULT_IGNORE_PREFIXES
    asset_extensions: tuple[str, ...] = DEFAULT_ASSET_EXTENSIONS
    max_anchor_samples: int = Field(default=DEFAULT_MAX_ANCHOR_SAMPLES, ge=0)

    @field_validator("root", mode="before")
    @classmethod
    def _coerce_root(cls, value: object) -> Path:
        if isinstance(value, Path):
            return value
        if isinstance(value, str) and value.strip():
            return Path(value.strip())
        raise ValueError("root must be a non-empty path-like string")

    @field_validator("document_extension")
    @classmethod
    def _validate_document_extension(cls, value: str) -> str:
        return _validate_extension(value, label="document_extension")

    @field_validator("index_document")
    @classmethod
    def _validate_index_document(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned or "/" in cleaned or "\\" in cleaned:
            raise ValueError("index_document must be a bare filename")
        return cleaned

    @field_validator("ignore_prefixes", mode="before")
    @classmethod
    def _coerce_ignore_prefixes(cls, value: object) -> tuple[str, ...]:
        return _coerce_string_tuple(value, label="ignore_prefixes")

    @field_validator("asset_extensions", mode="before")
    @classmethod
    def _coerce_asset_extensions(cls, value: object) -> tuple[str, ...]:
        extensions = _coerce_string_tuple(value, label="asset_extensions")
        lowered = (
            _validate_extension(item, label="asset_extensions entry").lower()
            for item in extensions
        )
        return tuple(dict.fromkeys(lowered))
