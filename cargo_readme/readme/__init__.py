"""Generate README content from crate doc comments."""

from __future__ import annotations

from typing import Iterable, Optional

from ..errors import DocLoadError, TemplateError
from ..logging import get_logger
from ..models import Manifest
from .extract import extract_docs, normalize_line
from .load import CommentStyle, DocBlock, iter_doc_lines, load_docs, load_docs_from_path
from .template import process_template, render
from .transform import DocProcessor, Section, fold_lines, process_docs

logger = get_logger("readme")


def extract_readme(source: Iterable[str], *, indent_headings: bool = True) -> str:
    """Run the doc pipeline over `source` lines and return the document text."""
    try:
        block = load_docs(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocLoadError(f"Could not read source: {exc}") from exc
    return readme_from_block(block, indent_headings=indent_headings)


def readme_from_block(block: DocBlock, *, indent_headings: bool = True) -> str:
    lines = process_docs(extract_docs(block), indent_headings)
    logger.debug("Transformed %d doc lines into %d readme lines", len(block), len(lines))
    return fold_lines(lines)


def generate_readme(
    source: Iterable[str],
    manifest: Manifest,
    template: Optional[str] = None,
    *,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
    indent_headings: bool = True,
) -> str:
    """Generate the README for a crate.

    `source` yields the lines of the crate entrypoint; `template`, when given,
    is the text of a template to render the result through.
    """
    readme = extract_readme(source, indent_headings=indent_headings)
    return render_readme(
        readme,
        manifest,
        template,
        add_title=add_title,
        add_badges=add_badges,
        add_license=add_license,
    )


def render_readme(
    readme: str,
    manifest: Manifest,
    template: Optional[str] = None,
    *,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
) -> str:
    """Add the crate metadata to already extracted `readme` text."""
    if add_license and manifest.license is None:
        raise TemplateError("License not found in Cargo.toml")

    return render(
        template,
        readme,
        manifest,
        add_title=add_title,
        add_badges=add_badges,
        add_license=add_license,
    )


__all__ = [
    "CommentStyle",
    "DocBlock",
    "DocProcessor",
    "Section",
    "extract_docs",
    "extract_readme",
    "generate_readme",
    "iter_doc_lines",
    "load_docs",
    "load_docs_from_path",
    "normalize_line",
    "process_docs",
    "process_template",
    "readme_from_block",
    "render",
    "render_readme",
]
