"""notedesk CLI application using Typer.

Command-line utilities for running the API and managing the database
schema.
"""

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from notedesk.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
    drop_tables,
)
from notedesk_config.settings import get_settings

app = typer.Typer(
    name="notedesk",
    help="notedesk - users and notes backend CLI",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _display_url(database_url: str) -> str:
    return database_url.split("@")[-1] if "@" in database_url else database_url


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "notedesk.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _run_init(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _run_reset(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing tables."""
    database_url = get_settings().database_url
    console.print(f"Database: [cyan]{_display_url(database_url)}[/cyan]")
    asyncio.run(_run_init(database_url))
    console.print("[bold green]Database initialized.[/bold green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all tables (deletes all data)."""
    database_url = get_settings().database_url
    console.print(f"Database: [cyan]{_display_url(database_url)}[/cyan]")

    if not force:
        console.print("[bold red]WARNING:[/bold red] This will DELETE ALL DATA!")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_run_reset(database_url))
    console.print("[bold green]Database recreated.[/bold green]")


if __name__ == "__main__":
    app()
