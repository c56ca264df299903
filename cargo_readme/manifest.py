"""Read crate information from `Cargo.toml`."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, List, Optional

from .badges import render_badges
from .errors import ManifestError
from .logging import get_logger
from .models import Manifest, ManifestTarget

MANIFEST_FILE = "Cargo.toml"

logger = get_logger("manifest")


def load_manifest(project_root: Path) -> Manifest:
    """Load the manifest of the crate rooted at `project_root`."""
    path = project_root / MANIFEST_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Could not read {MANIFEST_FILE}: {exc}") from exc
    return parse_manifest(text)


def parse_manifest(text: str) -> Manifest:
    """Build a `Manifest` from the contents of a Cargo.toml file."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"Invalid {MANIFEST_FILE}: {exc}") from exc

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError(f"Missing [package] section in {MANIFEST_FILE}")
    name = package.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"Missing package name in {MANIFEST_FILE}")

    badges = data.get("badges") or {}
    if not isinstance(badges, dict):
        raise ManifestError(f"[badges] must be a table in {MANIFEST_FILE}")

    manifest = Manifest(
        name=name,
        license=_as_str(package.get("license")),
        # `version.workspace = true` is inherited and cannot be resolved here
        version=_as_str(package.get("version")),
        badges=render_badges(badges),
        lib=_target(data.get("lib")),
        bins=_targets(data.get("bin")),
    )
    logger.debug(
        "Loaded manifest for %s (license=%s, %d badges)",
        manifest.name,
        manifest.license,
        len(manifest.badges),
    )
    return manifest


def _target(value: Any) -> Optional[ManifestTarget]:
    if not isinstance(value, dict):
        return None
    path = value.get("path")
    if not isinstance(path, str):
        return None
    doc = value.get("doc", True)
    return ManifestTarget(path=Path(path), doc=bool(doc))


def _targets(value: Any) -> List[ManifestTarget]:
    if not isinstance(value, list):
        return []
    targets: List[ManifestTarget] = []
    for item in value:
        target = _target(item)
        if target is not None:
            targets.append(target)
    return targets


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = ["MANIFEST_FILE", "load_manifest", "parse_manifest"]
