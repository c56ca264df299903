"""Tests for the README generation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_readme.errors import DocLoadError, ProjectError, TemplateError
from cargo_readme.orchestrator import Orchestrator
from tests._fixtures.crate_builder import CrateBuilder

LIB_RS = """
//! Crate level docs.
//!
//! # Usage
//!
//! ```no_run
//! # use readme_test::run;
//! run();
//! ```

pub fn run() {}
"""


def _crate(crate_builder: CrateBuilder, **files: str) -> Path:
    crate_builder.manifest()
    crate_builder.write({"src/lib.rs": LIB_RS, **files})
    return crate_builder.path()


def test_run_renders_default_readme(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder)
    orchestrator = Orchestrator()

    outcome = orchestrator.run(orchestrator.resolve_options(root), write=False)

    assert outcome.source == root / "src" / "lib.rs"
    assert outcome.template is None
    assert outcome.output is None
    assert outcome.readme == (
        "# readme-test\n\n"
        "Crate level docs.\n\n"
        "## Usage\n\n"
        "```rust\n"
        "run();\n"
        "```\n\n"
        "License: MIT"
    )


def test_run_uses_default_template(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder, **{"README.tpl": "# {{crate}} {{version}}\n\n{{readme}}\n"})
    orchestrator = Orchestrator()

    outcome = orchestrator.run(orchestrator.resolve_options(root), write=False)

    assert outcome.template == root / "README.tpl"
    assert outcome.readme.startswith("# readme-test 0.1.0\n\nCrate level docs.")
    assert "License" not in outcome.readme


def test_no_template_flag_ignores_readme_tpl(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder, **{"README.tpl": "{{readme}}\n"})
    orchestrator = Orchestrator()

    options = orchestrator.resolve_options(root, no_template=True)
    outcome = orchestrator.run(options, write=False)

    assert outcome.template is None
    assert outcome.readme.startswith("# readme-test\n\n")


def test_run_writes_output_relative_to_root(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder)
    orchestrator = Orchestrator()

    options = orchestrator.resolve_options(root, output="README.md", no_license=True)
    outcome = orchestrator.run(options)

    assert outcome.output == root / "README.md"
    written = (root / "README.md").read_text(encoding="utf-8")
    assert written == outcome.readme + "\n"
    assert not written.rstrip().endswith("License: MIT")


def test_config_file_provides_defaults(crate_builder: CrateBuilder) -> None:
    root = _crate(
        crate_builder,
        **{
            ".cargo-readme.yml": """
            input: src/docs.rs
            template: docs/README.tpl
            license: false
            indent_headings: false
            """,
            "src/docs.rs": "//! # Docs\n",
            "docs/README.tpl": "{{readme}}\n",
        },
    )
    orchestrator = Orchestrator()

    options = orchestrator.resolve_options(root)
    outcome = orchestrator.run(options, write=False)

    assert options.input == Path("src/docs.rs")
    assert options.template == Path("docs/README.tpl")
    assert options.add_license is False
    assert options.indent_headings is False
    assert outcome.readme == "# Docs"


def test_flags_take_precedence_over_config(crate_builder: CrateBuilder) -> None:
    root = _crate(
        crate_builder,
        **{".cargo-readme.yml": "input: src/missing.rs\ntitle: true\n"},
    )
    orchestrator = Orchestrator()

    options = orchestrator.resolve_options(root, input="src/lib.rs", no_title=True)

    assert options.input == Path("src/lib.rs")
    assert options.add_title is False
    assert orchestrator.run(options, write=False).readme.startswith("Crate level docs.")


def test_run_reports_missing_input(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder)
    orchestrator = Orchestrator()

    options = orchestrator.resolve_options(root, input="src/missing.rs")

    with pytest.raises(ProjectError, match="file not found"):
        orchestrator.run(options, write=False)


def test_run_reports_template_errors(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder, **{"README.tpl": "# {{crate}}\n"})
    orchestrator = Orchestrator()

    with pytest.raises(TemplateError, match=r"Missing `\{\{readme\}\}`"):
        orchestrator.run(orchestrator.resolve_options(root), write=False)


def test_run_reports_mixed_doc_styles(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder)
    crate_builder.write({"src/lib.rs": "//! line docs\n/*! block docs */\n"})
    orchestrator = Orchestrator()

    with pytest.raises(DocLoadError, match="Cannot mix"):
        orchestrator.run(orchestrator.resolve_options(root), write=False)


def test_run_reports_undecodable_source(crate_builder: CrateBuilder) -> None:
    root = _crate(crate_builder)
    (root / "src" / "lib.rs").write_bytes(b"//! broken \xff\n")
    orchestrator = Orchestrator()

    with pytest.raises(DocLoadError, match="as UTF-8") as excinfo:
        orchestrator.run(orchestrator.resolve_options(root), write=False)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
