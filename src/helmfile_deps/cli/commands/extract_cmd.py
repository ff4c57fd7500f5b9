"""hfdeps extract <file>... - Extract chart dependencies."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from helmfile_deps.cli.options import AliasOption, HelmReposOption, OutputOption, check_output, parse_aliases
from helmfile_deps.config.settings import build_extract_config, settings
from helmfile_deps.core.extractor import extract_package_file
from helmfile_deps.models.dependency import ExtractionResult
from helmfile_deps.output.formatters import output_results


def extract(
    files: List[Path] = typer.Argument(help="helmfile manifests to scan"),
    output: str = OutputOption,
    alias: Optional[List[str]] = AliasOption,
    helm_repos: bool = HelmReposOption,
) -> None:
    """Extract chart dependencies from one or more helmfile manifests."""
    check_output(output)
    config = build_extract_config(settings, parse_aliases(alias), use_helm_repositories=helm_repos)

    results: dict[str, ExtractionResult | None] = {}
    for path in files:
        if not path.is_file():
            typer.echo(f"File '{path}' not found.", err=True)
            raise typer.Exit(code=1)
        content = path.read_text(encoding="utf-8")
        results[str(path)] = extract_package_file(content, str(path), config)

    output_results(results, output)
