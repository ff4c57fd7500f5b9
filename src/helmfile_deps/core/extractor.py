"""Extract chart dependencies from a helmfile manifest."""

from __future__ import annotations

import logging

from helmfile_deps.config.settings import ExtractConfig
from helmfile_deps.core.document_loader import iter_documents
from helmfile_deps.core.release_classifier import classify_release
from helmfile_deps.core.repo_resolver import resolve_repositories
from helmfile_deps.models.dependency import DependencyRecord, ExtractionResult

logger = logging.getLogger(__name__)


def extract_package_file(
    content: str,
    file_name: str,
    config: ExtractConfig,
) -> ExtractionResult | None:
    """Extract one dependency record per release across all documents.

    Returns None when no document declares a releases list, which tells the
    caller the file is not a dependency manifest.
    """
    documents = list(iter_documents(content, file_name))
    repositories = resolve_repositories(config.aliases, documents)

    deps: list[DependencyRecord] = []
    for doc in documents:
        if not doc.releases:
            continue
        deps.extend(classify_release(release, repositories) for release in doc.releases)

    if not deps:
        logger.debug("No releases found in %s", file_name)
        return None
    logger.debug("Extracted %d dependencies from %s", len(deps), file_name)
    return ExtractionResult(deps=deps)
