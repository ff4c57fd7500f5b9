"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from helmfile_deps.models.dependency import ExtractionResult

console = Console()

OUTPUT_FORMATS = ("table", "json", "yaml")


def _print_data(data: Any, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    else:
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        # Raw text: no wrapping, markup or emoji substitution, so the output still parses.
        console.print(text, soft_wrap=True, markup=False, emoji=False, highlight=False, end="")


def output_results(results: dict[str, ExtractionResult | None], fmt: str) -> None:
    """Render extraction results keyed by file name."""
    if fmt in ("json", "yaml"):
        data = [
            {"file": name, "result": result.to_dict() if result else None}
            for name, result in results.items()
        ]
        _print_data(data, fmt)
        return

    from helmfile_deps.output.tables import dependency_table

    for name, result in results.items():
        if result is None:
            console.print(f"[dim]{escape(name)}: no releases found.[/dim]")
            continue
        console.print(dependency_table(result, title=name))
        skipped = sum(1 for d in result.deps if d.skipped)
        tracked = len(result.deps) - skipped
        console.print(f"[green]{tracked} tracked[/green], [yellow]{skipped} skipped[/yellow]\n")


def output_repositories(repositories: dict[str, str], fmt: str, title: str = "Repositories") -> None:
    if fmt in ("json", "yaml"):
        _print_data(repositories, fmt)
        return

    from helmfile_deps.output.tables import repository_table

    console.print(repository_table(repositories, title=title))
