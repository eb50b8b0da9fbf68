"""Mini README: Entry point CLI for the groupledger engine.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI adapter under uvicorn using host/port from settings unless
overridden, and ``demo`` reconciles a small sample group and prints who
owes whom, which is handy for checking an installation.
"""

from __future__ import annotations

import typer
import uvicorn

from groupledger import LedgerSession
from groupledger.configuration import get_settings
from groupledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Track shared expenses and settle group debts.")


def build_demo_session() -> LedgerSession:
    """Return a session where one person covered a dinner for three."""

    session = LedgerSession()
    alice = session.add_participant("Alice")
    bob = session.add_participant("Bob")
    carol = session.add_participant("Carol")
    session.add_payment(alice, "90.00")
    session.add_expense(alice, "Pasta", "30")
    session.add_expense(bob, "Steak", "35.50")
    session.add_expense(carol, "Salad", "24.50")
    return session


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI adapter using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting groupledger on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "groupledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def demo() -> None:
    """Print balances and the settlement for a sample group."""

    session = build_demo_session()
    settings = get_settings()
    for row in session.summary():
        typer.echo(f"{row['name']}: {settings.currency_symbol}{row['balance']:.2f}")
    result = session.compute_settlement()
    if not result.ok:
        typer.echo(result.message, err=True)
        raise typer.Exit(code=1)
    for transfer in result.transfers:
        typer.echo(transfer.describe())


if __name__ == "__main__":
    cli()
