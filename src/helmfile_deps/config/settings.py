"""Application configuration and defaults."""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_ALIASES: dict[str, str] = {
    "stable": "https://charts.helm.sh/stable",
}


def _default_helm_config_dir() -> Path:
    """Return the Helm client config directory, matching helm's own resolution order."""
    config_home = os.environ.get("HELM_CONFIG_HOME", "")
    if config_home:
        return Path(config_home)
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "helm"
        return Path.home() / "AppData" / "Roaming" / "helm"
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg) / "helm"
    return Path.home() / ".config" / "helm"


def load_helm_repositories(repos_file: Path) -> dict[str, str]:
    """Load repo name -> URL mapping from the Helm client's repositories.yaml."""
    if not repos_file.exists():
        return {}
    try:
        data = yaml.safe_load(repos_file.read_text(encoding="utf-8"))
    except Exception:
        logger.debug("Failed to parse %s", repos_file, exc_info=True)
        return {}
    if not isinstance(data, dict) or not isinstance(data.get("repositories"), list):
        return {}
    return {
        r["name"]: r["url"]
        for r in data["repositories"]
        if isinstance(r, dict) and isinstance(r.get("name"), str) and isinstance(r.get("url"), str)
    }


@dataclass
class ExtractConfig:
    """Everything the extractor needs from its caller."""

    aliases: dict[str, str] = field(default_factory=dict)


@dataclass
class Settings:
    helm_config_dir: Path = field(default_factory=_default_helm_config_dir)
    default_output: str = "table"
    default_aliases: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))

    @property
    def repositories_file(self) -> Path:
        return self.helm_config_dir / "repositories.yaml"


def build_extract_config(
    settings: Settings,
    extra_aliases: Mapping[str, str] | None = None,
    use_helm_repositories: bool = True,
) -> ExtractConfig:
    """Merge alias sources: defaults, then the local Helm repositories, then explicit ones."""
    aliases = dict(settings.default_aliases)
    if use_helm_repositories:
        aliases.update(load_helm_repositories(settings.repositories_file))
    if extra_aliases:
        aliases.update(extra_aliases)
    return ExtractConfig(aliases=aliases)


# Global singleton
settings = Settings()
