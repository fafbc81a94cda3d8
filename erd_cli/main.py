"""erd-cli - Main entry point."""

import typer
from pathlib import Path
from typing import Optional
from rich.console import Console

from .commands import draw
from .config import load_settings
from .errors import ConfigurationError

app = typer.Typer(
    name="erd-cli",
    help="Draw entity-relationship diagrams from a PostgreSQL catalog",
    add_completion=False,
)

# Add subcommands
app.add_typer(draw.app, name="draw")

console = Console()


@app.command()
def config(
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="JSON file with persisted options"),
):
    """Show current configuration."""
    try:
        settings = load_settings(template)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Host: {settings.pg_hostname}")
    console.print(f"  User: {settings.pg_username}")
    console.print(f"  Password configured: {'Yes' if settings.pg_password else 'No'}")
    console.print(f"  Database: {settings.pg_database}")
    console.print(f"  Schema: {settings.pg_schema}")
    console.print(f"  Include tables: {', '.join(settings.include_tables) if settings.include_tables is not None else 'All'}")
    console.print(f"  Exclude tables: {', '.join(settings.exclude_tables) if settings.exclude_tables else 'None'}")
    console.print(f"  Column description wrap: {settings.column_description_wrap or 'Off'}")
    console.print(f"  Table description wrap: {settings.table_description_wrap or 'Off'}")
    console.print(f"  Title: {settings.title or 'Not set'}")
    console.print(f"  Direction: {settings.direction}")


@app.callback()
def main():
    """
    erd-cli - Draw entity-relationship diagrams from a PostgreSQL catalog.

    Examples:

        erd-cli draw dot -d shop -o shop.dot

        erd-cli draw text -d shop

        erd-cli config
    """
    pass


if __name__ == "__main__":
    app()
