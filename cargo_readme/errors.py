"""Exception hierarchy for cargo-readme."""

from __future__ import annotations


class ReadmeError(RuntimeError):
    """Base error for every failure surfaced by cargo-readme."""

    stage = "readme"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        """Return a one-line diagnostic naming the failing stage."""
        return f"{self.stage}: {self.message}"


class DocLoadError(ReadmeError):
    """Raised when the source file cannot be read or decoded."""

    stage = "load"


class MixedCommentStyleError(DocLoadError):
    """Raised when `//!` and `/*!` doc comments are mixed in one file."""

    def __init__(self, message: str = "Cannot mix singleline and multiline doc comments") -> None:
        super().__init__(message)


class TemplateError(ReadmeError):
    """Raised when a template cannot be rendered with the available values."""

    stage = "template"


class ManifestError(ReadmeError):
    """Raised when Cargo.toml is missing or malformed."""

    stage = "manifest"


class ProjectError(ReadmeError):
    """Raised when the project layout cannot be resolved."""

    stage = "project"


class ConfigError(ReadmeError):
    """Raised when the configuration file cannot be parsed."""

    stage = "config"


__all__ = [
    "ConfigError",
    "DocLoadError",
    "ManifestError",
    "MixedCommentStyleError",
    "ProjectError",
    "ReadmeError",
    "TemplateError",
]
