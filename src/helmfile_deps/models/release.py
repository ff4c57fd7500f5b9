"""Helmfile release and repository models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _scalar(value: Any) -> str | None:
    """Return a YAML scalar as a string, or None when it is not usable as one.

    Numbers are kept in their string form (``version: 13.7``); booleans,
    mappings and sequences are treated as absent.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


@dataclass
class RepositoryAlias:
    name: str
    url: str
    oci: bool = False

    @property
    def registry_url(self) -> str:
        if self.oci and not self.url.startswith("oci://"):
            return f"oci://{self.url}"
        return self.url

    @classmethod
    def from_dict(cls, d: Any) -> RepositoryAlias | None:
        if not isinstance(d, dict):
            return None
        name = d.get("name")
        url = d.get("url")
        if not isinstance(name, str) or not isinstance(url, str) or not name:
            return None
        return cls(name=name, url=url, oci=d.get("oci") is True)


@dataclass
class ReleaseEntry:
    name: str | None = None
    chart: str | None = None
    version: str | None = None

    @classmethod
    def from_dict(cls, d: Any) -> ReleaseEntry:
        if not isinstance(d, dict):
            return cls()
        return cls(
            name=_scalar(d.get("name")),
            chart=_scalar(d.get("chart")),
            version=_scalar(d.get("version")),
        )


@dataclass
class ManifestDocument:
    index: int
    repositories: list[RepositoryAlias] = field(default_factory=list)
    releases: list[ReleaseEntry] | None = None
