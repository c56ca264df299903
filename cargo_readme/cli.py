"""CLI entrypoint for `cargo readme`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .errors import (
    ConfigError,
    DocLoadError,
    ManifestError,
    ProjectError,
    ReadmeError,
    TemplateError,
)
from .logging import configure_logging
from .orchestrator import Orchestrator

EXIT_LOAD = 1
EXIT_PROJECT = 2
EXIT_TEMPLATE = 3

_VERSION = f"cargo-readme v{__version__}"

_EXIT_CODES: dict[type[ReadmeError], int] = {
    DocLoadError: EXIT_LOAD,
    ProjectError: EXIT_PROJECT,
    ManifestError: EXIT_PROJECT,
    ConfigError: EXIT_PROJECT,
    TemplateError: EXIT_TEMPLATE,
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    # cargo runs third-party subcommands as `cargo-readme readme ...`
    parser = argparse.ArgumentParser(
        prog="cargo",
        description="Generate README.md content from Rust doc comments.",
    )
    parser.add_argument("--version", action="version", version=_VERSION)
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    readme_parser = subparsers.add_parser(
        "readme",
        help="Generate README.md from doc comments.",
        epilog="Input, output and template paths are relative to the project root.",
    )
    _add_verbose_option(readme_parser, suppress_default=True)
    readme_parser.add_argument("--version", action="version", version=_VERSION)
    readme_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a debug log of the run to this file.",
    )
    readme_parser.add_argument(
        "-r",
        "--project-root",
        default=None,
        help="Directory containing Cargo.toml (defaults to the current directory).",
    )
    readme_parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="File to read from. Defaults to src/lib.rs, src/main.rs or the target in Cargo.toml.",
    )
    readme_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="File to write to. If not provided, the README is printed to stdout.",
    )
    readme_parser.add_argument(
        "-t",
        "--template",
        default=None,
        help="Template used to render the output (defaults to README.tpl if present).",
    )
    readme_parser.add_argument(
        "--no-title",
        action="store_true",
        help="Do not prepend the crate name as a title.",
    )
    readme_parser.add_argument(
        "--no-badges",
        action="store_true",
        help="Do not prepend badges from Cargo.toml.",
    )
    readme_parser.add_argument(
        "--no-license",
        action="store_true",
        help="Do not append the license line.",
    )
    readme_parser.add_argument(
        "--no-template",
        action="store_true",
        help="Ignore the default README.tpl.",
    )
    readme_parser.add_argument(
        "--no-indent-headings",
        action="store_true",
        help="Do not push markdown headings one level down.",
    )
    return parser


def exit_code_for(exc: ReadmeError) -> int:
    """Return the process exit status for a failed stage."""
    for error_type, code in _EXIT_CODES.items():
        if isinstance(exc, error_type):
            return code
    return EXIT_LOAD


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for `cargo readme`."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(getattr(args, "verbose", False)),
        log_file=getattr(args, "log_file", None),
    )

    orchestrator = Orchestrator()

    if args.command == "readme":
        try:
            options = orchestrator.resolve_options(
                args.project_root,
                input=args.input,
                output=args.output,
                template=args.template,
                no_template=bool(args.no_template),
                no_title=bool(args.no_title),
                no_badges=bool(args.no_badges),
                no_license=bool(args.no_license),
                no_indent_headings=bool(args.no_indent_headings),
            )
            orchestrator.run(options)
        except ReadmeError as exc:
            parser.exit(exit_code_for(exc), f"Error: {exc.describe()}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
