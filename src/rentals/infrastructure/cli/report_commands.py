"""CLI commands for dashboard and calendar reports."""

from __future__ import annotations

from datetime import date

import click

from rentals.application.calendar_events import CalendarEventsHandler
from rentals.application.dashboard_stats import DashboardStatsHandler
from rentals.domain.exceptions import DomainException
from rentals.infrastructure.bootstrap import clothing_set_repository, order_repository
from rentals.infrastructure.config import Settings


@click.command("dashboard")
@click.pass_obj
def dashboard_show(settings: Settings) -> None:
    """Show headline figures."""
    handler = DashboardStatsHandler(
        clothing_set_repo=clothing_set_repository(settings),
        order_repo=order_repository(settings),
        currency=settings.currency,
    )

    try:
        stats = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Clothing sets:    {stats.total_sets}")
    click.echo(f"Active rentals:   {stats.active_rentals}")
    click.echo(f"Pending returns:  {stats.pending_returns}")
    click.echo(f"Monthly revenue:  {stats.monthly_revenue}")


@click.command("calendar")
@click.option("--year", type=int, default=None, help="Year (defaults to this year).")
@click.option("--month", type=int, default=None, help="Month 1-12 (defaults to this month).")
@click.pass_obj
def calendar_show(settings: Settings, year: int | None, month: int | None) -> None:
    """List rental days in a month."""
    today = date.today()
    handler = CalendarEventsHandler(
        order_repo=order_repository(settings),
        clothing_set_repo=clothing_set_repository(settings),
    )

    try:
        events = handler.handle(year or today.year, month or today.month)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not events:
        click.echo("No rentals this month.")
        return

    for e in events:
        click.echo(f"{e.date}  {e.order_number:<14} {e.status:<10} {e.customer:<20} {e.title}")
