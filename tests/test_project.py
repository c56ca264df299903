"""Tests for project root, entrypoint and output resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_readme.errors import ProjectError, TemplateError
from cargo_readme.manifest import load_manifest
from cargo_readme.project import (
    find_entrypoint,
    get_project_root,
    get_source_path,
    get_template_path,
    read_template,
    write_output,
)
from tests._fixtures.crate_builder import CrateBuilder


def test_project_root_defaults_to_cwd(crate_builder: CrateBuilder, monkeypatch: pytest.MonkeyPatch) -> None:
    crate_builder.manifest()
    monkeypatch.chdir(crate_builder.path())

    assert get_project_root() == crate_builder.path()


def test_relative_project_root_is_resolved_from_cwd(
    crate_builder: CrateBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    crate_builder.manifest()
    monkeypatch.chdir(crate_builder.path().parent)

    assert get_project_root("crate") == crate_builder.path()


def test_project_root_requires_manifest(tmp_path: Path) -> None:
    with pytest.raises(ProjectError, match="does not look like a Rust/Cargo project"):
        get_project_root(tmp_path)


def test_entrypoint_prefers_lib_over_main(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest()
    crate_builder.write({"src/lib.rs": "//! lib\n", "src/main.rs": "//! main\n"})
    root = crate_builder.path()

    assert find_entrypoint(root, load_manifest(root)) == root / "src" / "lib.rs"


def test_entrypoint_falls_back_to_main(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest()
    crate_builder.write({"src/main.rs": "//! main\n"})
    root = crate_builder.path()

    assert find_entrypoint(root, load_manifest(root)) == root / "src" / "main.rs"


def test_entrypoint_uses_lib_target(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest(
        """
        [package]
        name = "custom"

        [lib]
        path = "lib/entry.rs"
        """
    )
    crate_builder.write({"lib/entry.rs": "//! custom lib\n"})
    root = crate_builder.path()

    assert find_entrypoint(root, load_manifest(root)) == root / "lib" / "entry.rs"


def test_entrypoint_skips_undocumented_bins(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest(
        """
        [package]
        name = "tools"

        [[bin]]
        name = "one"
        path = "bin/one.rs"

        [[bin]]
        name = "two"
        path = "bin/two.rs"
        doc = false
        """
    )
    crate_builder.write({"bin/one.rs": "//! one\n", "bin/two.rs": "//! two\n"})
    root = crate_builder.path()

    assert find_entrypoint(root, load_manifest(root)) == root / "bin" / "one.rs"


def test_entrypoint_rejects_multiple_bins(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest(
        """
        [package]
        name = "tools"

        [[bin]]
        name = "one"
        path = "bin/one.rs"

        [[bin]]
        name = "two"
        path = "bin/two.rs"
        """
    )
    root = crate_builder.path()

    with pytest.raises(ProjectError, match=r"Multiple binaries found, choose one: \[bin/one.rs, bin/two.rs\]"):
        find_entrypoint(root, load_manifest(root))


def test_entrypoint_missing(crate_builder: CrateBuilder) -> None:
    crate_builder.manifest()
    root = crate_builder.path()

    with pytest.raises(ProjectError, match="No entrypoint found"):
        find_entrypoint(root, load_manifest(root))


def test_source_path_must_exist(crate_builder: CrateBuilder) -> None:
    crate_builder.write({"src/other.rs": "//! other\n"})
    root = crate_builder.path()

    assert get_source_path(root, "src/other.rs") == root / "src" / "other.rs"
    with pytest.raises(ProjectError, match="file not found"):
        get_source_path(root, "src/missing.rs")


def test_template_path_defaults_to_readme_tpl(crate_builder: CrateBuilder) -> None:
    root = crate_builder.path()
    assert get_template_path(root) is None

    crate_builder.write({"README.tpl": "{{readme}}\n"})

    assert get_template_path(root) == root / "README.tpl"
    assert get_template_path(root, no_template=True) is None


def test_explicit_template_must_exist(crate_builder: CrateBuilder) -> None:
    root = crate_builder.path()

    with pytest.raises(ProjectError, match="Could not open template file"):
        get_template_path(root, "docs/README.tpl")


def test_read_template_wraps_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "README.tpl"
    path.write_bytes(b"\xff{{readme}}")

    with pytest.raises(TemplateError, match="Could not read template file"):
        read_template(path)


def test_write_output_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_output("# readme")

    assert capsys.readouterr().out == "# readme\n"


def test_write_output_to_file_appends_newline(tmp_path: Path) -> None:
    output = tmp_path / "README.md"

    write_output("# readme", output)

    assert output.read_text(encoding="utf-8") == "# readme\n"


def test_write_output_to_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ProjectError, match="Could not write to output file"):
        write_output("# readme", tmp_path / "missing" / "README.md")
