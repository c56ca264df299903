"""Core data models shared across cargo-readme components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class ManifestTarget:
    """A `[lib]` or `[[bin]]` target declared in Cargo.toml."""

    path: Path
    doc: bool = True


@dataclass
class Manifest:
    """Read-only view of the Cargo.toml fields used to render a README."""

    name: str
    license: Optional[str] = None
    version: Optional[str] = None
    badges: List[str] = field(default_factory=list)
    lib: Optional[ManifestTarget] = None
    bins: List[ManifestTarget] = field(default_factory=list)


@dataclass
class ReadmeOptions:
    """Resolved options for a single README generation run."""

    project_root: Path
    input: Optional[Path] = None
    output: Optional[Path] = None
    template: Optional[Path] = None
    no_template: bool = False
    add_title: bool = True
    add_badges: bool = True
    add_license: bool = True
    indent_headings: bool = True
