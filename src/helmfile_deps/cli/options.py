"""Shared CLI options and option parsing."""

from __future__ import annotations

import typer

from helmfile_deps.output.formatters import OUTPUT_FORMATS

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
AliasOption = typer.Option(None, "--alias", "-a", help="Repository alias as NAME=URL (repeatable)")
HelmReposOption = typer.Option(
    True,
    "--helm-repos/--no-helm-repos",
    help="Include repositories from the local Helm client configuration",
)


def check_output(output: str) -> str:
    if output not in OUTPUT_FORMATS:
        typer.echo(f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}.", err=True)
        raise typer.Exit(code=1)
    return output


def parse_aliases(values: list[str] | None) -> dict[str, str]:
    """Parse repeated NAME=URL options into an alias map."""
    aliases: dict[str, str] = {}
    for value in values or []:
        name, sep, url = value.partition("=")
        name, url = name.strip(), url.strip()
        if not sep or not name or not url:
            typer.echo(f"Invalid alias '{value}', expected NAME=URL.", err=True)
            raise typer.Exit(code=1)
        aliases[name] = url
    return aliases
