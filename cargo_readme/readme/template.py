"""Render the README, optionally through a template.

This is not a template engine: a handful of tokens are substituted verbatim.

- ``{{readme}}`` documentation extracted from the crate docs (required)
- ``{{crate}}`` crate name from Cargo.toml
- ``{{badges}}`` badges from Cargo.toml, one per line
- ``{{license}}`` license from Cargo.toml
- ``{{version}}`` version from Cargo.toml
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..errors import TemplateError
from ..models import Manifest

README_TOKEN = "{{readme}}"
CRATE_TOKEN = "{{crate}}"
BADGES_TOKEN = "{{badges}}"
LICENSE_TOKEN = "{{license}}"
VERSION_TOKEN = "{{version}}"


def render(
    template: Optional[str],
    readme: str,
    manifest: Manifest,
    *,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
) -> str:
    """Render `readme` with the crate metadata from `manifest`."""
    if template is None:
        if add_badges:
            readme = prepend_badges(readme, manifest.badges)
        if add_title:
            readme = prepend_title(readme, manifest.name)
        if add_license:
            if manifest.license is None:
                raise TemplateError("License not found in Cargo.toml")
            readme = append_license(readme, manifest.license)
        return readme

    if LICENSE_TOKEN in template and not add_license:
        raise TemplateError(
            "`{{license}}` was found in template but license should not be rendered"
        )
    if BADGES_TOKEN in template and not add_badges:
        raise TemplateError(
            "`{{badges}}` was found in template but badges should not be rendered"
        )
    if CRATE_TOKEN in template and not add_title:
        raise TemplateError(
            "`{{crate}}` was found in template but title should not be rendered"
        )

    return process_template(
        template,
        readme,
        title=manifest.name if add_title else None,
        badges=manifest.badges if add_badges else None,
        license=manifest.license if add_license else None,
        version=manifest.version,
    )


def process_template(
    template: str,
    readme: str,
    *,
    title: Optional[str] = None,
    badges: Optional[Sequence[str]] = None,
    license: Optional[str] = None,
    version: Optional[str] = None,
) -> str:
    """Substitute the template tokens; `{{readme}}` is substituted last."""
    template = template.rstrip("\n")

    if README_TOKEN not in template:
        raise TemplateError("Missing `{{readme}}` in template")

    if BADGES_TOKEN in template and badges is None:
        raise TemplateError("`{{badges}}` was found in template but no badges were provided")
    if LICENSE_TOKEN in template and license is None:
        raise TemplateError("`{{license}}` was found in template but no license was provided")
    if CRATE_TOKEN in template and title is None:
        raise TemplateError("`{{crate}}` was found in template but no crate name was provided")
    if VERSION_TOKEN in template and version is None:
        raise TemplateError("`{{version}}` was found in template but no version was provided")

    if title is not None:
        template = template.replace(CRATE_TOKEN, title)
    if badges is not None:
        template = template.replace(BADGES_TOKEN, fold_badges(badges))
    if license is not None:
        template = template.replace(LICENSE_TOKEN, license)
    if version is not None:
        template = template.replace(VERSION_TOKEN, version)

    return template.replace(README_TOKEN, readme)


def fold_badges(badges: Sequence[str]) -> str:
    return "\n".join(badges)


def prepend_badges(readme: str, badges: Sequence[str]) -> str:
    """Place the badge block above `readme`, separated by a blank line."""
    if not badges:
        return readme
    return f"{fold_badges(badges)}\n\n{readme}"


def prepend_title(readme: str, crate_name: str) -> str:
    title = f"# {crate_name}"
    if not readme.strip():
        return title
    return f"{title}\n\n{readme}"


def append_license(readme: str, license: str) -> str:
    license_line = f"License: {license}"
    if not readme.strip():
        return license_line
    return f"{readme}\n\n{license_line}"


__all__ = [
    "append_license",
    "fold_badges",
    "prepend_badges",
    "prepend_title",
    "process_template",
    "render",
]
