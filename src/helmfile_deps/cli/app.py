"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="hfdeps",
    help="Helmfile Deps - Find the chart dependencies declared in helmfile manifests.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _register_commands() -> None:
    from helmfile_deps.cli.commands.extract_cmd import extract
    from helmfile_deps.cli.commands.repos_cmd import repos

    app.command("extract", help="Extract chart dependencies from helmfile manifests")(extract)
    app.command("repos", help="Show the repositories a manifest resolves")(repos)


_register_commands()


def main() -> None:
    app()
