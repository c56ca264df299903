"""Pipeline orchestration for a `cargo readme` run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import ReadmeConfig, load_config
from .logging import get_logger
from .manifest import load_manifest
from .models import ReadmeOptions
from .project import (
    find_entrypoint,
    get_project_root,
    get_source_path,
    get_template_path,
    read_template,
    write_output,
)
from .readme import load_docs_from_path, readme_from_block, render_readme


@dataclass
class ReadmeOutcome:
    """Result of a README generation run."""

    readme: str
    source: Path
    template: Optional[Path]
    output: Optional[Path]


class Orchestrator:
    """Resolve a project, render its README and write it out."""

    def __init__(self) -> None:
        self.logger = get_logger("orchestrator")

    def resolve_options(
        self,
        project_root: Optional[Path | str] = None,
        *,
        input: Optional[str] = None,
        output: Optional[str] = None,
        template: Optional[str] = None,
        no_template: bool = False,
        no_title: bool = False,
        no_badges: bool = False,
        no_license: bool = False,
        no_indent_headings: bool = False,
    ) -> ReadmeOptions:
        """Merge command-line flags over the project's .cargo-readme.yml."""
        root = get_project_root(project_root)
        config = load_config(root)
        self.logger.debug("Project root: %s", root)

        template = template if template is not None else config.template
        return ReadmeOptions(
            project_root=root,
            input=Path(input) if input else _optional_path(config.input),
            output=Path(output) if output else _optional_path(config.output),
            template=None if no_template else _optional_path(template),
            no_template=no_template,
            add_title=not no_title and _enabled(config, "title"),
            add_badges=not no_badges and _enabled(config, "badges"),
            add_license=not no_license and _enabled(config, "license"),
            indent_headings=not no_indent_headings and _enabled(config, "indent_headings"),
        )

    def run(self, options: ReadmeOptions, *, write: bool = True) -> ReadmeOutcome:
        """Generate the README described by `options`."""
        root = options.project_root
        manifest = load_manifest(root)

        if options.input is not None:
            source = get_source_path(root, options.input)
        else:
            source = find_entrypoint(root, manifest)
        self.logger.debug("Reading doc comments from %s", source)

        template_path = get_template_path(root, options.template, no_template=options.no_template)
        template = read_template(template_path) if template_path is not None else None

        block = load_docs_from_path(source)
        readme = render_readme(
            readme_from_block(block, indent_headings=options.indent_headings),
            manifest,
            template,
            add_title=options.add_title,
            add_badges=options.add_badges,
            add_license=options.add_license,
        )

        output = root / options.output if options.output is not None else None
        if write:
            write_output(readme, output)
        return ReadmeOutcome(readme=readme, source=source, template=template_path, output=output)


def _enabled(config: ReadmeConfig, name: str) -> bool:
    value = getattr(config, name)
    return True if value is None else value


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


__all__ = ["Orchestrator", "ReadmeOutcome"]
