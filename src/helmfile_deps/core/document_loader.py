"""Split a helmfile manifest into YAML documents and parse each one on its own."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

import yaml

from helmfile_deps.core.template_sanitizer import sanitize_template
from helmfile_deps.models.release import ManifestDocument, ReleaseEntry, RepositoryAlias

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)


class ManifestLoader(_YamlLoader):
    """Safe loader that keeps numeric scalars as written (`1.10` stays "1.10")."""


def _construct_numeric_text(loader: ManifestLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


ManifestLoader.add_constructor("tag:yaml.org,2002:int", _construct_numeric_text)
ManifestLoader.add_constructor("tag:yaml.org,2002:float", _construct_numeric_text)

_DOCUMENT_BOUNDARY = re.compile(r"^(?:---|\.\.\.)[ \t]*(?:#[^\n]*)?\r?$", re.MULTILINE)


def split_documents(content: str) -> list[str]:
    """Split text on document boundary lines, keeping empty chunks in place."""
    return _DOCUMENT_BOUNDARY.split(content)


def parse_document(text: str) -> Any:
    """Parse one YAML document. Raises yaml.YAMLError on invalid input."""
    return yaml.load(text, Loader=ManifestLoader)


def _to_document(index: int, doc: Any, file_name: str) -> ManifestDocument:
    if not isinstance(doc, dict):
        return ManifestDocument(index=index)

    repositories: list[RepositoryAlias] = []
    raw_repos = doc.get("repositories")
    if isinstance(raw_repos, list):
        for raw in raw_repos:
            repo = RepositoryAlias.from_dict(raw)
            if repo is None:
                logger.debug("Ignoring malformed repository %r in %s", raw, file_name)
                continue
            repositories.append(repo)

    releases = None
    raw_releases = doc.get("releases")
    if isinstance(raw_releases, list):
        releases = [ReleaseEntry.from_dict(r) for r in raw_releases]

    return ManifestDocument(index=index, repositories=repositories, releases=releases)


def iter_documents(content: str, file_name: str = "") -> Iterator[ManifestDocument]:
    """Yield a ManifestDocument for every sub-document that parses.

    Documents that fail to parse are logged and skipped; the rest are still
    produced in source order.
    """
    sanitized = sanitize_template(content or "")
    for index, text in enumerate(split_documents(sanitized)):
        try:
            doc = parse_document(text)
        except Exception:
            logger.debug("Failed to parse document %d of %s", index, file_name, exc_info=True)
            continue
        yield _to_document(index, doc, file_name)
