"""CLI commands for availability checks."""

from __future__ import annotations

from datetime import datetime

import click

from rentals.application.check_availability import CheckAvailabilityHandler
from rentals.domain.exceptions import DomainException
from rentals.infrastructure.bootstrap import clothing_set_repository, order_repository
from rentals.infrastructure.config import Settings

DATE = click.DateTime(formats=["%Y-%m-%d"])


def _handler(settings: Settings) -> CheckAvailabilityHandler:
    return CheckAvailabilityHandler(
        clothing_set_repo=clothing_set_repository(settings),
        order_repo=order_repository(settings),
    )


@click.command("check")
@click.option("--set", "set_id", required=True, type=int, help="Clothing set ID.")
@click.option("--start", required=True, type=DATE, help="First day (YYYY-MM-DD).")
@click.option("--end", required=True, type=DATE, help="Last day (YYYY-MM-DD).")
@click.pass_obj
def availability_check(settings: Settings, set_id: int, start: datetime, end: datetime) -> None:
    """Show free units of a set over a date range."""
    try:
        dto = _handler(settings).handle(set_id, start.date(), end.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Set #{dto.clothing_set_id}: {dto.available_quantity} of "
        f"{dto.total_quantity} available"
    )


@click.command("quantity")
@click.option("--set", "set_id", required=True, type=int, help="Clothing set ID.")
@click.option("--start", required=True, type=DATE, help="First day (YYYY-MM-DD).")
@click.option("--end", required=True, type=DATE, help="Last day (YYYY-MM-DD).")
@click.option("--quantity", required=True, type=int, help="Units wanted.")
@click.pass_obj
def availability_quantity(
    settings: Settings,
    set_id: int,
    start: datetime,
    end: datetime,
    quantity: int,
) -> None:
    """Say whether a number of units can be booked."""
    try:
        dto = _handler(settings).handle_quantity(set_id, start.date(), end.date(), quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    verdict = "yes" if dto.available else "no"
    click.echo(
        f"Available: {verdict} (requested {dto.requested_quantity}, "
        f"available {dto.available_quantity})"
    )
