"""Resolve the project root, source entrypoint, template and output destination."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import ProjectError, TemplateError
from .logging import get_logger
from .manifest import MANIFEST_FILE
from .models import Manifest

DEFAULT_TEMPLATE = "README.tpl"

logger = get_logger("project")


def get_project_root(given_root: Optional[Path | str] = None) -> Path:
    """Return the project root, defaulting to the current directory.

    Relative paths are resolved against the current directory. The root must
    contain a `Cargo.toml` file.
    """
    current_dir = Path.cwd()
    if given_root is None:
        root = current_dir
    else:
        root = Path(given_root).expanduser()
        if not root.is_absolute():
            root = current_dir / root

    if not (root / MANIFEST_FILE).is_file():
        raise ProjectError(f"`{root}` does not look like a Rust/Cargo project")
    return root


def find_entrypoint(project_root: Path, manifest: Manifest) -> Path:
    """Find the file to read the crate docs from.

    Candidates, in order:

    - ``src/lib.rs``
    - ``src/main.rs``
    - the ``[lib]`` path in Cargo.toml
    - the ``[[bin]]`` path in Cargo.toml, when exactly one is documented
    """
    for candidate in ("src/lib.rs", "src/main.rs"):
        path = project_root / candidate
        if path.is_file():
            logger.debug("Using entrypoint %s", candidate)
            return path

    if manifest.lib is not None and manifest.lib.doc:
        path = project_root / manifest.lib.path
        if path.is_file():
            logger.debug("Using [lib] entrypoint %s", manifest.lib.path)
            return path

    documented = [target for target in manifest.bins if target.doc]
    if len(documented) > 1:
        paths = ", ".join(target.path.as_posix() for target in documented)
        raise ProjectError(f"Multiple binaries found, choose one: [{paths}]")
    if documented:
        path = project_root / documented[0].path
        if path.is_file():
            logger.debug("Using [[bin]] entrypoint %s", documented[0].path)
            return path

    raise ProjectError("No entrypoint found")


def get_source_path(project_root: Path, input_path: Path | str) -> Path:
    """Return the explicit source file, relative to the project root."""
    path = project_root / input_path
    if not path.is_file():
        raise ProjectError(f"Could not open file '{path}': file not found")
    return path


def get_template_path(
    project_root: Path, template: Optional[Path | str] = None, *, no_template: bool = False
) -> Optional[Path]:
    """Return the template to render with, if any.

    An explicit template must exist; otherwise `README.tpl` in the project
    root is picked up when present, unless `no_template` is set.
    """
    if template is not None:
        path = project_root / template
        if not path.is_file():
            raise ProjectError(f"Could not open template file '{path}': file not found")
        return path
    if no_template:
        return None
    default = project_root / DEFAULT_TEMPLATE
    if default.is_file():
        logger.debug("Using default template %s", DEFAULT_TEMPLATE)
        return default
    return None


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"Could not read template file '{path}': {exc}") from exc


def write_output(readme: str, output: Optional[Path] = None) -> None:
    """Write `readme` to `output`, or print it when no output is given.

    A trailing newline is appended to files so the result matches
    `cargo readme > README.md`.
    """
    if output is None:
        print(readme)
        return
    try:
        output.write_text(readme + "\n", encoding="utf-8")
    except OSError as exc:
        raise ProjectError(f"Could not write to output file '{output}': {exc}") from exc
    logger.info("README written to %s", output)


__all__ = [
    "DEFAULT_TEMPLATE",
    "find_entrypoint",
    "get_project_root",
    "get_source_path",
    "get_template_path",
    "read_template",
    "write_output",
]
