"""
Command-line interface for the site query layer.

Uses Typer to expose each prepared query as a command. Global options pick
the config file, the content root and the log level.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import load_config
from .logging_utils import setup_logging
from .queries import PreparedQueries, build_queries

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    content_root: Path = typer.Option(
        Path("."), "--content-root", help="Directory content paths are relative to."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write a JSONL log to this file."),
):
    """Query site content: cover usage, type counts, filters and redirects."""
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.log_path = str(log_file)
    setup_logging(cfg.logging)
    ctx.obj = {"cfg": cfg, "root": content_root}


def _queries(ctx: typer.Context) -> PreparedQueries:
    return build_queries(ctx.obj["cfg"], ctx.obj["root"])


@app.command()
def covers(ctx: typer.Context):
    """Show how many records use each cover image."""
    table = Table("Cover", "Count")
    for cover, count in _queries(ctx).cover_image_usage().items():
        table.add_row(cover, str(count))
    console.print(table)


@app.command()
def types(ctx: typer.Context):
    """Show the number of records of each type."""
    table = Table("Type", "Count")
    for record_type, count in _queries(ctx).snippet_count_by_type().items():
        table.add_row(record_type, str(count))
    console.print(table)


@app.command()
def match(
    ctx: typer.Context,
    language: str | None = typer.Option(None, "--language", "-l", help="Language id."),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Tag to match."),
    type: str | None = typer.Option(
        None, "--type", help="Record type; 'article' matches anything but snippets."
    ),
    primary: bool = typer.Option(
        False, "--primary/--any-tag", help="Match the primary tag only."
    ),
):
    """List records matching every given filter."""
    results = _queries(ctx).match_snippets(
        language=language, tag=tag, type=type, primary=primary
    )
    for record in results:
        console.print(f"{record.slug}\t{record.title or ''}".rstrip())
    console.print(f"{len(results)} matching records", style="dim")


@app.command()
def alternatives(ctx: typer.Context, slug: str = typer.Argument(..., help="Canonical slug.")):
    """List the slug and every slug that redirects to it."""
    for alternative in _queries(ctx).page_alternative_urls(slug):
        console.print(alternative)


if __name__ == "__main__":
    app()
