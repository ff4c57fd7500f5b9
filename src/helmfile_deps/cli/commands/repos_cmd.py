"""hfdeps repos <file> - Show the resolved repository map."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from helmfile_deps.cli.options import AliasOption, HelmReposOption, OutputOption, check_output, parse_aliases
from helmfile_deps.config.settings import build_extract_config, settings
from helmfile_deps.core.document_loader import iter_documents
from helmfile_deps.core.repo_resolver import resolve_repositories
from helmfile_deps.output.formatters import output_repositories


def repos(
    file: Path = typer.Argument(help="helmfile manifest"),
    output: str = OutputOption,
    alias: Optional[List[str]] = AliasOption,
    helm_repos: bool = HelmReposOption,
) -> None:
    """Show the repository aliases available to releases in a manifest."""
    check_output(output)
    if not file.is_file():
        typer.echo(f"File '{file}' not found.", err=True)
        raise typer.Exit(code=1)

    config = build_extract_config(settings, parse_aliases(alias), use_helm_repositories=helm_repos)
    content = file.read_text(encoding="utf-8")
    repositories = resolve_repositories(config.aliases, iter_documents(content, str(file)))
    output_repositories(repositories, output, title=str(file))
