"""Badge rendering for the `[badges]` table of Cargo.toml.

See https://doc.rust-lang.org/cargo/reference/manifest.html#package-metadata
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional
from urllib.parse import quote

from .errors import ManifestError
from .logging import get_logger

BADGE_BRANCH_DEFAULT = "master"
BADGE_SERVICE_DEFAULT = "github"
BADGE_WORKFLOW_DEFAULT = "main"

logger = get_logger("badges")

BadgeAttrs = Mapping[str, object]


def appveyor(attrs: BadgeAttrs) -> str:
    repo = _repository("appveyor", attrs)
    branch = _attr(attrs, "branch", BADGE_BRANCH_DEFAULT)
    service = _attr(attrs, "service", BADGE_SERVICE_DEFAULT)
    return (
        f"[![Build Status](https://ci.appveyor.com/api/projects/status/{service}/{repo}"
        f"?branch={branch}&svg=true)](https://ci.appveyor.com/project/{repo}/branch/{branch})"
    )


def circle_ci(attrs: BadgeAttrs) -> str:
    repo = _repository("circle-ci", attrs)
    branch = percent_encode(_attr(attrs, "branch", BADGE_BRANCH_DEFAULT))
    service = badge_service_short_name(_attr(attrs, "service", BADGE_SERVICE_DEFAULT))
    return (
        f"[![Build Status](https://circleci.com/{service}/{repo}/tree/{branch}.svg?style=shield)]"
        f"(https://circleci.com/{service}/{repo}/tree/{branch})"
    )


def gitlab(attrs: BadgeAttrs) -> str:
    repo = _repository("gitlab", attrs)
    branch = percent_encode(_attr(attrs, "branch", BADGE_BRANCH_DEFAULT))
    return (
        f"[![Build Status](https://gitlab.com/{repo}/badges/{branch}/pipeline.svg)]"
        f"(https://gitlab.com/{repo}/commits/master)"
    )


def travis_ci(attrs: BadgeAttrs) -> str:
    repo = _repository("travis-ci", attrs)
    branch = percent_encode(_attr(attrs, "branch", BADGE_BRANCH_DEFAULT))
    tld = _attr(attrs, "tld", "org")
    return (
        f"[![Build Status](https://travis-ci.{tld}/{repo}.svg?branch={branch})]"
        f"(https://travis-ci.{tld}/{repo})"
    )


def github(attrs: BadgeAttrs) -> str:
    repo = _repository("github", attrs)
    workflow = _attr(attrs, "workflow", BADGE_WORKFLOW_DEFAULT)
    return (
        f"[![Workflow Status](https://github.com/{repo}/workflows/{percent_encode(workflow)}/badge.svg)]"
        f"(https://github.com/{repo}/actions?query=workflow%3A%22"
        f"{percent_encode(workflow.replace(' ', '+'))}%22)"
    )


def codecov(attrs: BadgeAttrs) -> str:
    repo = _repository("codecov", attrs)
    branch = percent_encode(_attr(attrs, "branch", BADGE_BRANCH_DEFAULT))
    service = badge_service_short_name(_attr(attrs, "service", BADGE_SERVICE_DEFAULT))
    return (
        f"[![Coverage Status](https://codecov.io/{service}/{repo}/branch/{branch}/graph/badge.svg)]"
        f"(https://codecov.io/{service}/{repo})"
    )


def coveralls(attrs: BadgeAttrs) -> str:
    repo = _repository("coveralls", attrs)
    branch = percent_encode(_attr(attrs, "branch", BADGE_BRANCH_DEFAULT))
    service = _attr(attrs, "service", BADGE_SERVICE_DEFAULT)
    return (
        f"[![Coverage Status](https://coveralls.io/repos/{service}/{repo}/badge.svg?branch={branch})]"
        f"(https://coveralls.io/{service}/{repo}?branch={branch})"
    )


def is_it_maintained_issue_resolution(attrs: BadgeAttrs) -> str:
    repo = _repository("is-it-maintained-issue-resolution", attrs)
    return (
        f"[![Average time to resolve an issue](https://isitmaintained.com/badge/resolution/{repo}.svg)]"
        f"(https://isitmaintained.com/project/{repo} \"Average time to resolve an issue\")"
    )


def is_it_maintained_open_issues(attrs: BadgeAttrs) -> str:
    repo = _repository("is-it-maintained-open-issues", attrs)
    return (
        f"[![Percentage of issues still open](https://isitmaintained.com/badge/open/{repo}.svg)]"
        f"(https://isitmaintained.com/project/{repo} \"Percentage of issues still open\")"
    )


# https://github.com/rust-lang/crates.io/blob/master/src/models/badge.rs
_MAINTENANCE_STATUS: Dict[str, str] = {
    "actively-developed": "actively--developed-brightgreen",
    "passively-maintained": "passively--maintained-yellowgreen",
    "as-is": "as--is-yellow",
    "experimental": "experimental-blue",
    "looking-for-maintainer": "looking--for--maintainer-darkblue",
    "deprecated": "deprecated-red",
}


def maintenance(attrs: BadgeAttrs) -> Optional[str]:
    status = _attr(attrs, "status", "none")
    badge = _MAINTENANCE_STATUS.get(status)
    if badge is None:
        return None
    return f"![Maintenance](https://img.shields.io/badge/maintenance-{badge}.svg)"


BADGE_PROVIDERS: Dict[str, Callable[[BadgeAttrs], Optional[str]]] = {
    "appveyor": appveyor,
    "circle-ci": circle_ci,
    "gitlab": gitlab,
    "travis-ci": travis_ci,
    "github": github,
    "codecov": codecov,
    "coveralls": coveralls,
    "is-it-maintained-issue-resolution": is_it_maintained_issue_resolution,
    "is-it-maintained-open-issues": is_it_maintained_open_issues,
    "maintenance": maintenance,
}


def render_badges(badges: Mapping[str, object]) -> List[str]:
    """Render the `[badges]` table in provider order, skipping unknown providers."""
    unknown = sorted(set(badges) - set(BADGE_PROVIDERS))
    for name in unknown:
        logger.debug("Ignoring unsupported badge provider '%s'", name)

    rendered: List[str] = []
    for name, provider in BADGE_PROVIDERS.items():
        attrs = badges.get(name)
        if attrs is None:
            continue
        if not isinstance(attrs, Mapping):
            raise ManifestError(f"Badge '{name}' must be a table in Cargo.toml")
        badge = provider(attrs)
        if badge is not None:
            rendered.append(badge)
    return rendered


# quote() leaves these unescaped; badge URLs escape every non-alphanumeric byte
_UNRESERVED = {"-": "%2D", ".": "%2E", "_": "%5F", "~": "%7E"}


def percent_encode(value: str) -> str:
    return "".join(_UNRESERVED.get(char, char) for char in quote(value, safe=""))


def badge_service_short_name(service: str) -> str:
    return {"github": "gh", "bitbucket": "bb", "gitlab": "gl"}.get(service, "gh")


def _repository(name: str, attrs: BadgeAttrs) -> str:
    repo = attrs.get("repository")
    if not isinstance(repo, str) or not repo:
        raise ManifestError(f"Badge '{name}' is missing the 'repository' attribute")
    return repo


def _attr(attrs: BadgeAttrs, key: str, default: str) -> str:
    value = attrs.get(key)
    return str(value) if value is not None else default


__all__ = ["BADGE_PROVIDERS", "render_badges"]
