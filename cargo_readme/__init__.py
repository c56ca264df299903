"""Create README.md content from Rust doc comments."""

from .errors import (
    ConfigError,
    DocLoadError,
    ManifestError,
    MixedCommentStyleError,
    ProjectError,
    ReadmeError,
    TemplateError,
)
from .models import Manifest, ManifestTarget, ReadmeOptions
from .readme import generate_readme

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DocLoadError",
    "Manifest",
    "ManifestError",
    "ManifestTarget",
    "MixedCommentStyleError",
    "ProjectError",
    "ReadmeError",
    "ReadmeOptions",
    "TemplateError",
    "generate_readme",
]
