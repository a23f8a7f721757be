"""
Econova CLI

Command-line interface for tenant administration.

Commands:
- provision: Create a tenant with its feature flags and setting overrides
- list-tenants: List active tenants
- recalculate: Bring derived waste fields forward to the current formula
- init-db: Create database tables
"""

import asyncio
from contextlib import asynccontextmanager
from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from econova.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from econova.app.use_cases.admin import RecalculateDerivedFieldsUseCase
from econova.app.use_cases.reports import WindowRequest, build_window
from econova.app.use_cases.tenants import (
    ListTenantsUseCase,
    ProvisionTenantCommand,
    ProvisionTenantUseCase,
)
from econova.depends import init_db as create_tables
from econova.domain.entities import Feature, RecalculationStatus

app = typer.Typer(
    name="econova",
    help="Econova tenant administration CLI",
)

console = Console()

state = {"db_uri": None}


@app.callback()
def main(
    db_uri: Optional[str] = typer.Option(None, "--db-uri", help="Database URI (defaults to config)"),
):
    state["db_uri"] = db_uri or ApplicationConfig.DB_URI


def _db_uri() -> str:
    return state["db_uri"] or ApplicationConfig.DB_URI


@asynccontextmanager
async def unit_of_work():
    """Open a unit of work on a short-lived engine owned by the current event loop."""
    engine = create_async_engine(_db_uri(), poolclass=NullPool)
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield SqlAlchemyUnitOfWork(session)
    finally:
        await engine.dispose()


def parse_settings(pairs: List[str]) -> dict:
    """Parse key=value pairs; values stay strings."""
    settings = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--setting")
        settings[key.strip()] = value
    return settings


@app.command()
def provision(
    slug: str = typer.Argument(..., help="URL-safe tenant identifier"),
    name: str = typer.Argument(..., help="Display name"),
    description: Optional[str] = typer.Option(None, help="Tenant description"),
    logo: Optional[str] = typer.Option(None, help="Logo path or URL"),
    primary_color: Optional[str] = typer.Option(None, help="Primary brand color"),
    secondary_color: Optional[str] = typer.Option(None, help="Secondary brand color"),
    subdomain: Optional[str] = typer.Option(None, help="Tenant subdomain"),
    contact_email: Optional[str] = typer.Option(None, help="Contact email"),
    contact_phone: Optional[str] = typer.Option(None, help="Contact phone"),
    address: Optional[str] = typer.Option(None, help="Postal address"),
    feature: Optional[List[str]] = typer.Option(None, "--feature", help="Feature to enable (repeatable)"),
    all_features: bool = typer.Option(False, "--all-features", help="Enable every catalog feature"),
    setting: Optional[List[str]] = typer.Option(None, "--setting", help="Setting override key=value (repeatable)"),
):
    """
    Provision a new tenant.

    Without --feature or --all-features the configured default features are
    enabled. An existing slug is reported and nothing is changed.
    """
    if all_features:
        features = [f.value for f in Feature.catalog()]
    elif feature:
        features = list(feature)
    else:
        features = None

    command = ProvisionTenantCommand(
        slug=slug,
        name=name,
        description=description,
        logo=logo,
        primary_color=primary_color,
        secondary_color=secondary_color,
        subdomain=subdomain,
        contact_email=contact_email,
        contact_phone=contact_phone,
        address=address,
        features=features,
        settings=parse_settings(setting or []),
    )

    async def run():
        async with unit_of_work() as uow:
            return await ProvisionTenantUseCase(uow).execute(command)

    result = asyncio.run(run())

    if result.is_err():
        error = result.error
        if error.code == "TENANT_ALREADY_EXISTS":
            rprint(f"[yellow]Tenant '{slug}' already exists[/yellow]")
            rprint(f"  ID: {error.reason}")
        else:
            rprint(f"[red]{error.code}: {error.message}[/red]")
            if error.reason:
                rprint(f"  {error.reason}")
        raise typer.Exit(1)

    tenant = result.value
    rprint("[green]Tenant provisioned:[/green]")
    rprint(f"  ID: {tenant.id}")
    rprint(f"  Slug: {tenant.slug}")
    rprint(f"  Name: {tenant.name}")
    rprint(f"  Features: {', '.join(tenant.features_enabled) or '-'}")
    rprint(f"  Dashboard: {tenant.dashboard_url}")


@app.command("list-tenants")
def list_tenants():
    """List active tenants."""

    async def run():
        async with unit_of_work() as uow:
            return await ListTenantsUseCase(uow).execute()

    tenants = asyncio.run(run()).value
    if not tenants:
        rprint("[yellow]No active tenants[/yellow]")
        return

    table = Table(title="Tenants")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Dashboard")
    table.add_column("ID", style="dim")
    for tenant in tenants:
        table.add_row(tenant.slug, tenant.name, tenant.dashboard_url, tenant.id)
    console.print(table)


@app.command()
def recalculate(
    slug: str = typer.Argument(..., help="Tenant slug"),
    kind: Optional[str] = typer.Option(None, help="Window kind to limit the job to"),
    year: Optional[int] = typer.Option(None, help="Window year"),
    quarter: Optional[int] = typer.Option(None, help="Window quarter (1-4)"),
    month: Optional[int] = typer.Option(None, help="Window month (1-12)"),
):
    """
    Recalculate total_waste and deviation for a tenant's observations.

    Exits with status 1 when any row fails; re-running retries those rows.
    """
    window = None
    if kind is not None:
        if year is None:
            rprint("[red]--year is required with --kind[/red]")
            raise typer.Exit(1)
        window, error = build_window(
            WindowRequest(kind=kind, year=year, quarter=quarter, month=month)
        )
        if error is not None:
            rprint(f"[red]{error.code}: {error.message}[/red]")
            raise typer.Exit(1)

    async def run():
        async with unit_of_work() as uow:
            return await RecalculateDerivedFieldsUseCase(uow).execute(slug, window)

    result = asyncio.run(run())
    if result.is_err():
        rprint(f"[red]{result.error.code}: {result.error.message}[/red]")
        raise typer.Exit(1)

    report = result.value
    table = Table(title=f"Recalculation for {slug}")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    table.add_row("Window", report.window or "all")
    table.add_row("Formula revision", str(report.formula_revision))
    table.add_row("Examined", str(report.examined))
    table.add_row("Updated", str(report.updated))
    table.add_row("Unchanged", str(report.unchanged))
    table.add_row("Failed", str(len(report.failed_ids)))
    console.print(table)

    if report.status == RecalculationStatus.partial_failure.value:
        rprint("[red]Some observations failed:[/red]")
        for observation_id in report.failed_ids:
            rprint(f"  {observation_id}")
        raise typer.Exit(1)

    rprint("[green]Recalculation completed[/green]")


@app.command("init-db")
def init_db():
    """Create all tables."""

    async def run():
        engine = create_async_engine(_db_uri(), poolclass=NullPool)
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(run())
    rprint(f"[green]Tables created on {_db_uri()}[/green]")


if __name__ == "__main__":
    app()
