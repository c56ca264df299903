"""Configuration loading for cargo-readme (.cargo-readme.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

CONFIG_FILE = ".cargo-readme.yml"


@dataclass
class ReadmeConfig:
    """Per-project defaults read from .cargo-readme.yml.

    Every field is optional; command-line flags take precedence.
    """

    root: Path
    input: Optional[str] = None
    output: Optional[str] = None
    template: Optional[str] = None
    title: Optional[bool] = None
    badges: Optional[bool] = None
    license: Optional[bool] = None
    indent_headings: Optional[bool] = None


def load_config(config_path: Path) -> ReadmeConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE} must contain a mapping at the root")

    return ReadmeConfig(
        root=root,
        input=_as_str(data.get("input")),
        output=_as_str(data.get("output")),
        template=_as_str(data.get("template")),
        title=_as_bool(data.get("title")),
        badges=_as_bool(data.get("badges")),
        license=_as_bool(data.get("license")),
        indent_headings=_as_bool(data.get("indent_headings")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE).resolve()
    if config_path.name != CONFIG_FILE:
        return (config_path.parent / CONFIG_FILE).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILE", "ReadmeConfig", "load_config"]
