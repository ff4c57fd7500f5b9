"""Repository alias resolution for helmfile chart references."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from helmfile_deps.models.release import ManifestDocument

logger = logging.getLogger(__name__)


def resolve_repositories(
    aliases: Mapping[str, str],
    documents: Iterable[ManifestDocument],
) -> dict[str, str]:
    """Build the alias -> URL map shared by every release in a manifest.

    Caller-supplied aliases come first; repository declarations from each
    document are applied in order, later names overriding earlier ones.
    """
    repos = dict(aliases)
    for doc in documents:
        for repo in doc.repositories:
            repos[repo.name] = repo.registry_url
    logger.debug("Resolved repositories: %s", repos)
    return repos
