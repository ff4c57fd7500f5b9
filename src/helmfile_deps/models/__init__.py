"""Data models for helmfile dependency extraction."""

from __future__ import annotations

import enum

HELM_DATASOURCE = "helm"


class SkipReason(enum.Enum):
    LOCAL_CHART = "local-chart"
    UNSUPPORTED_CHART_TYPE = "unsupported-chart-type"
    UNKNOWN_REPOSITORY = "unknown-repository"
    INVALID_NAME = "invalid-name"
    INVALID_VERSION = "invalid-version"
