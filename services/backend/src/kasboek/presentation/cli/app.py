"""Kasboek CLI application using Typer.

Command-line access to recurring pattern detection, mainly for
operators and scheduled jobs.
"""

import asyncio
import logging
import sys
from typing import Optional
from uuid import UUID

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kasboek.application.commands.recurring import DetectRecurringPatternsCommand
from kasboek.application.queries.recurring import ListRecurringPatternsQuery
from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.shared.exceptions import DomainException
from kasboek.infrastructure.persistence.sqlalchemy.engine import build_engine
from kasboek.infrastructure.persistence.sqlalchemy.init_db import create_tables
from kasboek.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from kasboek_config import configure_logging, get_settings

app = typer.Typer(
    name="kasboek",
    help="Kasboek - recurring payment detection CLI",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr)


def _format_amount(minor_units: int) -> str:
    return f"{minor_units / 100:,.2f}"


def _patterns_table(title: str, patterns: list[RecurringPattern]) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Frequency")
    table.add_column("Amount", justify="right")
    table.add_column("Next expected")
    table.add_column("Confidence", justify="right")
    table.add_column("Active")

    for pattern in patterns:
        table.add_row(
            pattern.display_name,
            pattern.transaction_type.value,
            pattern.frequency.label,
            _format_amount(pattern.predicted_amount),
            pattern.next_expected_date.isoformat(),
            f"{pattern.confidence_score:.0%}",
            "yes" if pattern.is_active else "[dim]no[/dim]",
        )
    return table


async def _detect(account_id: UUID, force: bool) -> list[RecurringPattern]:
    settings = get_settings()
    engine = build_engine(settings.database_url)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            command = DetectRecurringPatternsCommand.from_factory(
                factory,
                config=settings.detection_config(),
            )
            try:
                patterns = await command.execute(account_id, force=force)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            return patterns
    finally:
        await engine.dispose()


async def _list(
    account_id: UUID,
    frequency: Optional[str],
    active_only: Optional[bool],
) -> list[RecurringPattern]:
    engine = build_engine(get_settings().database_url)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with session_maker() as session:
            query = ListRecurringPatternsQuery.from_factory(
                SQLAlchemyRepositoryFactory(session),
            )
            return await query.execute(
                account_id,
                frequency=frequency,
                active_only=active_only,
            )
    finally:
        await engine.dispose()


async def _init_db() -> None:
    engine = build_engine(get_settings().database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@app.command("detect")
def detect(
    account_id: UUID = typer.Argument(..., help="Ledger account ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Replace existing patterns"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Detect recurring patterns for an account."""
    _configure_logging(verbose)

    try:
        patterns = asyncio.run(_detect(account_id, force))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.code.value})")
        raise typer.Exit(code=1) from e

    if not patterns:
        console.print("[yellow]No new recurring patterns found.[/yellow]")
        return

    console.print(_patterns_table(f"Detected {len(patterns)} patterns", patterns))


@app.command("list")
def list_patterns(
    account_id: UUID = typer.Argument(..., help="Ledger account ID"),
    frequency: Optional[str] = typer.Option(None, "--frequency", help="e.g. monthly"),
    active_only: bool = typer.Option(False, "--active-only", help="Hide inactive"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """List the recurring patterns of an account."""
    _configure_logging(verbose)

    try:
        patterns = asyncio.run(
            _list(account_id, frequency, True if active_only else None),
        )
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.code.value})")
        raise typer.Exit(code=1) from e

    if not patterns:
        console.print("[dim]No recurring patterns.[/dim]")
        return

    console.print(_patterns_table("Recurring patterns", patterns))


@app.command("init-db")
def init_db(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Create missing database tables."""
    _configure_logging(verbose)
    asyncio.run(_init_db())
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "kasboek.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
