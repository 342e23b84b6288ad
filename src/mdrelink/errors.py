from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class MdRelinkError(Exception):
    """Base exception for configuration, scan, and rewrite failures."""


class ConfigValidationError(MdRelinkError):
    """Raised when the link-check configuration is invalid."""


@dataclass(slots=True)
class ScanRootNotFoundError(MdRelinkError):
    """Raised when the requested scan root is not an existing directory."""

    root: Path

    def __str__(self) -> str:
        return f"Directory not found: '{self.root}'"


@dataclass(slots=True)
class FixWriteError(MdRelinkError):
    """Raised when a fixed document cannot be written back."""

    path: Path
    detail: str

    def __str__(self) -> str:
        return f"cannot write fixes to '{self.path}': {self.detail}"
