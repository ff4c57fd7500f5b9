"""Extracted dependency models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from helmfile_deps.models import HELM_DATASOURCE, SkipReason


@dataclass(frozen=True)
class DependencyRecord:
    dep_name: str | None = None
    current_value: str | None = None
    registry_url: str | None = None
    skip_reason: SkipReason | None = None
    datasource: str = HELM_DATASOURCE

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping consumed by update tooling, absent fields omitted."""
        data: dict[str, Any] = {}
        if self.dep_name is not None:
            data["depName"] = self.dep_name
        if self.current_value is not None:
            data["currentValue"] = self.current_value
        data["datasource"] = self.datasource
        if self.registry_url is not None:
            data["registryUrl"] = self.registry_url
        if self.skip_reason is not None:
            data["skipReason"] = self.skip_reason.value
        return data


@dataclass
class ExtractionResult:
    deps: list[DependencyRecord] = field(default_factory=list)
    datasource: str = HELM_DATASOURCE

    def to_dict(self) -> dict[str, Any]:
        return {
            "datasource": self.datasource,
            "deps": [d.to_dict() for d in self.deps],
        }
