"""Helmfile chart dependency extraction."""

from helmfile_deps.core.extractor import extract_package_file

__all__ = ["extract_package_file"]
