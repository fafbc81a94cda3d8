"""Draw commands - render an ER diagram from a PostgreSQL catalog."""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional

import typer
from typing_extensions import Annotated
from rich.console import Console

from ..config import Settings, load_settings
from ..database import PostgresCatalog
from ..drawer import get_drawer
from ..errors import ErdError, RenderError
from ..schema import Schema

app = typer.Typer(help="Render ER diagrams from a PostgreSQL schema")
console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _resolve_settings(
    template: Optional[Path],
    host: Optional[str],
    user: Optional[str],
    password: Optional[str],
    database: Optional[str],
    schema: Optional[str],
) -> Settings:
    """Load persisted settings and apply connection flags given on the command line."""
    settings = load_settings(template)
    overrides = {
        "pg_hostname": host,
        "pg_username": user,
        "pg_password": password,
        "pg_database": database,
        "pg_schema": schema,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def load_schema(settings: Settings) -> Schema:
    """Introspect the configured database and return its Schema."""
    with PostgresCatalog.from_settings(settings) as catalog:
        return catalog.load_schema(settings)


@contextmanager
def open_sink(output: Optional[Path]) -> Iterator[BinaryIO]:
    """Yield a binary sink: the output file, or stdout when none is given."""
    if output is None:
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return

    try:
        sink = open(output, "wb")
    except OSError as e:
        raise RenderError(f"Cannot open output file {output}: {e}") from e
    with sink:
        yield sink


def draw(
    format_name: str,
    settings: Settings,
    output: Optional[Path] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    title: Optional[str] = None,
    title_loc: Optional[str] = None,
    title_size: Optional[int] = None,
    title_color: Optional[str] = None,
    direction: Optional[str] = None,
) -> Schema:
    """Load the schema and write it with the drawer registered for ``format_name``.

    Presentation options left as None fall back to the settings values.
    """
    drawer = get_drawer(format_name)
    schema = load_schema(settings)

    with open_sink(output) as sink:
        drawer.render(
            schema,
            sink,
            include=include or None,
            exclude=exclude or None,
            title=title if title is not None else settings.title,
            title_loc=title_loc or settings.title_loc,
            title_size=title_size if title_size is not None else settings.title_size,
            title_color=title_color or settings.title_color,
            direction=direction or settings.direction,
        )
    return schema


def _report(schema: Schema, output: Optional[Path]) -> None:
    if output is not None:
        console.print(
            f"[green]Wrote {len(schema.tables)} tables and "
            f"{len(schema.relations)} relations to {output}[/green]"
        )


@app.command("dot")
def draw_dot(
    include: Annotated[Optional[List[str]], typer.Option(
        "--include", "-i",
        help="Only draw these tables. Can be specified multiple times."
    )] = None,
    exclude: Annotated[Optional[List[str]], typer.Option(
        "--exclude", "-e",
        help="Never draw these tables. Can be specified multiple times."
    )] = None,
    title: Optional[str] = typer.Option(None, "--title", help="Diagram title"),
    title_loc: Optional[str] = typer.Option(None, "--title-loc", help="Title placement: t (top) or b (bottom)"),
    title_size: Optional[int] = typer.Option(None, "--title-size", help="Title font size"),
    title_color: Optional[str] = typer.Option(None, "--title-color", help="Title font color"),
    direction: Optional[str] = typer.Option(None, "--direction", help="Layout direction: TB, LR, BT or RL"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="JSON file with persisted options"),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="PostgreSQL host (or PG_HOSTNAME env)"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="PostgreSQL user (or PG_USERNAME env)"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="PostgreSQL password (or PG_PASSWORD env)"),
    database: Optional[str] = typer.Option(None, "--database", "-d", help="Database name (or PG_DATABASE env)"),
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema name (or PG_SCHEMA env)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Draw the schema as a Graphviz dot document.

    Tables listed in the settings' exclude_tables are never loaded; the
    --include/--exclude flags narrow the diagram further.

    Examples:
        erd-cli draw dot -d shop -o shop.dot
        erd-cli draw dot -i users -i orders --title "Orders" --direction LR | dot -Tpng > orders.png
    """
    _configure_logging(verbose)
    try:
        settings = _resolve_settings(template, host, user, password, database, schema)
        loaded = draw(
            "dot",
            settings,
            output=output,
            include=include,
            exclude=exclude,
            title=title,
            title_loc=title_loc,
            title_size=title_size,
            title_color=title_color,
            direction=direction,
        )
    except ImportError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except ErdError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    _report(loaded, output)


@app.command("text")
def draw_text(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="JSON file with persisted options"),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="PostgreSQL host (or PG_HOSTNAME env)"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="PostgreSQL user (or PG_USERNAME env)"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="PostgreSQL password (or PG_PASSWORD env)"),
    database: Optional[str] = typer.Option(None, "--database", "-d", help="Database name (or PG_DATABASE env)"),
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema name (or PG_SCHEMA env)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Dump every loaded table and relation as plain text.
    """
    _configure_logging(verbose)
    try:
        settings = _resolve_settings(template, host, user, password, database, schema)
        loaded = draw("text", settings, output=output)
    except ImportError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except ErdError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    _report(loaded, output)
