"""Vecino CLI application using Typer.

This module provides command-line utilities for the Vecino backend:
secret generation, database checks, demo seeding, and running the API.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from vecino.domain.shared.exceptions import ServiceUnavailableError
from vecino.infrastructure.persistence.mongo import MongoConnection
from vecino.infrastructure.persistence.store import DataStore
from vecino_auth import PasswordHashingService
from vecino_config.settings import load_settings_or_exit
from vecino_demo.seed import seed_demo_data

app = typer.Typer(
    name="vecino",
    help="Vecino - neighborhood services marketplace CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a strong JWT_SECRET for the .env file."""
    console.print("\n[bold green]Vecino Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes of entropy for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"\n[cyan]JWT_SECRET[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the value to your config/.env (production) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _check_database(connection: MongoConnection) -> dict:
    try:
        await connection.connect()
        return await connection.health_check()
    finally:
        await connection.close()


@db_app.command("check")
def check_database() -> None:
    """Check that MongoDB is reachable and list its collections."""
    settings = load_settings_or_exit()
    connection = MongoConnection.from_settings(settings)
    console.print(f"Connecting to [bold]{connection.masked_uri}[/bold] ...")

    report = asyncio.run(_check_database(connection))
    if not report["connected"]:
        console.print("[red]✗ MongoDB is not reachable[/red]")
        console.print("[dim]The API will serve mock data and refuse writes.[/dim]")
        raise typer.Exit(code=1)

    table = Table(title="MongoDB")
    table.add_column("Host")
    table.add_column("Database")
    table.add_column("Collections")
    table.add_row(
        report["host"] or "-",
        report["database"],
        ", ".join(report["collections"]) or "(none)",
    )
    console.print(table)
    console.print("[green]✓ Connected[/green]")


async def _seed(connection: MongoConnection):
    try:
        await connection.connect()
        store = DataStore.from_connection(connection)
        return await seed_demo_data(store, PasswordHashingService())
    finally:
        await connection.close()


@db_app.command("seed")
def seed_database() -> None:
    """Insert the demo user and demo provider."""
    settings = load_settings_or_exit()
    connection = MongoConnection.from_settings(settings)

    try:
        user, provider = asyncio.run(_seed(connection))
    except ServiceUnavailableError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(code=1) from None

    console.print(f"[green]✓ Demo user[/green] {user.email} ({user.id})")
    console.print(f"[green]✓ Demo provider[/green] {provider.business_name} ({provider.id})")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    settings = load_settings_or_exit()
    uvicorn.run(
        "vecino.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
