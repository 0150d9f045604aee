"""CLI entry point for Blogsmith."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from blogsmith.builder import Blogsmith, build_pipeline
from blogsmith.config import BlogsmithConfig, load_config
from blogsmith.config.loader import DEFAULT_CONFIG_TEMPLATE

app = typer.Typer(
    name="blogsmith",
    help="Build a blog from markdown sources into a static site.",
)

config_app = typer.Typer(help="Manage Blogsmith configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: BlogsmithConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> BlogsmithConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to blogsmith.yaml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    level = logging.DEBUG if verbose else _LOG_LEVELS[_config.log_level]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def build(
    source: Annotated[str | None, typer.Option("--source", "-s", help="Source directory")] = None,
    destination: Annotated[
        str | None, typer.Option("--destination", "-d", help="Build directory")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be written")] = False,
) -> None:
    """Build the site from the source directory."""
    cfg = _get_config()
    updates = {}
    if source:
        updates["source"] = source
    if destination:
        updates["destination"] = destination
    if updates:
        cfg = cfg.model_copy(update=updates)

    smith = Blogsmith(cfg)
    result = smith.build(dry_run=dry_run)

    if result.ok and dry_run:
        table = Table(title="Dry Run: files that would be written")
        table.add_column("Destination", style="green")
        for rel in result.written:
            table.add_row(rel)
        rprint(table)

    if not result.ok:
        raise typer.Exit(1)


@app.command()
def steps() -> None:
    """List the pipeline steps the current config produces, in order."""
    cfg = _get_config()
    table = Table(title="Pipeline")
    table.add_column("#", justify="right")
    table.add_column("Step", style="cyan")
    for i, name in enumerate(build_pipeline(cfg).names, start=1):
        table.add_row(str(i), name)
    rprint(table)


@config_app.command("init")
def config_init(
    path: Annotated[str, typer.Option("--path", help="Where to write the config")] = "blogsmith.yaml",
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write a default blogsmith.yaml."""
    target = Path(path)
    if target.exists() and not force:
        rprint(f"[yellow]{target} already exists[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""
    cfg = _get_config()
    dumped = yaml.safe_dump(cfg.model_dump(), default_flow_style=False, sort_keys=False)
    rprint(Syntax(dumped, "yaml"))
