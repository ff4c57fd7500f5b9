"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from helmfile_deps.models.dependency import ExtractionResult
from helmfile_deps.output.themes import styled_skip_reason


def dependency_table(result: ExtractionResult, title: str = "Chart Dependencies") -> Table:
    table = Table(title=escape(title), expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Version", style="bold")
    table.add_column("Registry", style="cyan", max_width=50)
    table.add_column("Status", no_wrap=True)

    for i, dep in enumerate(result.deps, 1):
        table.add_row(
            str(i),
            escape(dep.dep_name or "-"),
            escape(dep.current_value or "-"),
            escape(dep.registry_url or "-"),
            styled_skip_reason(dep.skip_reason),
        )
    return table


def repository_table(repositories: dict[str, str], title: str = "Repositories") -> Table:
    table = Table(title=escape(title), expand=False)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("URL")
    for name, url in sorted(repositories.items()):
        table.add_row(escape(name), escape(url))
    return table
