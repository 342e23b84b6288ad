from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from mdrelink.config.models import LinkCheckConfig
from mdrelink.errors import ConfigValidationError

PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TABLE = ("tool", "mdrelink")


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigValidationError(f"cannot read config file '{path}': {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigValidationError(f"invalid TOML in '{path}': {exc}") from exc


def _select_table(raw: dict[str, Any], config_path: Path) -> dict[str, Any]:
    if config_path.name != PYPROJECT_FILENAME:
        return raw
    table: Any = raw
    for key in PYPROJECT_TABLE:
        if not isinstance(table, dict):
            break
        table = table.get(key, {})
    if not isinstance(table, dict):
        raise ConfigValidationError(
            f"'[{'.'.join(PYPROJECT_TABLE)}]' in '{config_path}' must be a table"
        )
    return table


def load_check_config(path: str | Path | None = None) -> LinkCheckConfig:
    """Load a link-check config, or the defaults when no path is given.

    A ``pyproject.toml`` is read from its ``[tool.mdrelink]`` table; any other
    file is read from its top level. A relative ``root`` is resolved against
    the config file's directory (or the working directory for defaults).
    """
    if path is None:
        return _resolve_root(LinkCheckConfig(), Path.cwd())

    config_path = Path(path).expanduser().resolve()
    raw = _select_table(_read_toml(config_path), config_path)
    try:
        config = LinkCheckConfig.model_validate(raw)
    except Exception as exc:  # pydantic ValidationError
        raise ConfigValidationError(
            f"invalid link-check config '{config_path}': {exc}"
        ) from exc
    return _resolve_root(config, config_path.parent)


def _resolve_root(config: LinkCheckConfig, base_dir: Path) -> LinkCheckConfig:
    root = config.root.expanduser()
    if not root.is_absolute():
        root = base_dir / root
    return config.model_copy(update={"root": root.resolve()})
