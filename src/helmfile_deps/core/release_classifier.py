"""Decide, per helmfile release, whether it is a trackable chart dependency."""

from __future__ import annotations

import re
from collections.abc import Mapping

from helmfile_deps.models import SkipReason
from helmfile_deps.models.dependency import DependencyRecord
from helmfile_deps.models.release import ReleaseEntry

# Helm chart names: lowercase letters and digits, words separated by single hyphens.
CHART_NAME_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_LOCAL_PREFIXES = ("./", "../")


def is_valid_chart_name(name: str) -> bool:
    return CHART_NAME_PATTERN.fullmatch(name) is not None


def is_usable_version(version: str | None) -> bool:
    """A version is usable when present, non-blank and free of template leftovers."""
    if version is None or not version.strip():
        return False
    return "{{" not in version and "}}" not in version


def split_chart_reference(chart: str) -> tuple[str, str] | None:
    """Split ``alias/name`` into its two parts, or None for any other shape."""
    parts = chart.split("/")
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


def classify_release(release: ReleaseEntry, repositories: Mapping[str, str]) -> DependencyRecord:
    """Return the dependency record for one release.

    Rules are checked in order and the first one that applies decides the
    skip reason: missing chart, local chart, chart shape, unknown repository,
    chart name, then version.
    """
    version = release.version if is_usable_version(release.version) else None
    chart = release.chart.strip() if release.chart else ""

    if not chart:
        return DependencyRecord(
            dep_name=release.name,
            current_value=version,
            skip_reason=SkipReason.INVALID_NAME,
        )

    if chart.startswith(_LOCAL_PREFIXES):
        return DependencyRecord(
            dep_name=release.name,
            current_value=version,
            skip_reason=SkipReason.LOCAL_CHART,
        )

    reference = split_chart_reference(chart)
    if reference is None:
        return DependencyRecord(
            dep_name=release.name,
            current_value=version,
            skip_reason=SkipReason.UNSUPPORTED_CHART_TYPE,
        )

    repo_name, chart_name = reference
    registry_url = repositories.get(repo_name)
    if registry_url is None:
        return DependencyRecord(
            dep_name=chart_name,
            current_value=version,
            skip_reason=SkipReason.UNKNOWN_REPOSITORY,
        )

    if not is_valid_chart_name(chart_name):
        skip_reason = SkipReason.INVALID_NAME
    elif version is None:
        skip_reason = SkipReason.INVALID_VERSION
    else:
        skip_reason = None

    return DependencyRecord(
        dep_name=chart_name,
        current_value=version,
        registry_url=registry_url,
        skip_reason=skip_reason,
    )
