from __future__ import annotations

from pathlib import Path

import click

from rentals.domain.model.value_objects import DEFAULT_CURRENCY
from rentals.infrastructure.cli.availability_commands import (
    availability_check,
    availability_quantity,
)
from rentals.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_seed,
    category_show,
    category_update,
)
from rentals.infrastructure.cli.clothing_set_commands import (
    set_add,
    set_list,
    set_remove,
    set_show,
    set_update,
)
from rentals.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_return,
    order_ship,
    order_show,
    order_status,
)
from rentals.infrastructure.cli.report_commands import calendar_show, dashboard_show
from rentals.infrastructure.config import (
    CURRENCY_ENV,
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    LOG_LEVEL_ENV,
    Settings,
    parse_log_level,
    verbosity_to_level,
)
from rentals.infrastructure.logging_setup import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--currency",
    envvar=CURRENCY_ENV,
    default=DEFAULT_CURRENCY,
    show_default=True,
    help="Currency for newly priced clothing sets.",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default="WARNING",
    show_default=True,
    help="Base log level.",
)
@click.option("-v", "--verbose", count=True, help="Lower the log level (repeatable).")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path,
    currency: str,
    log_level: str,
    verbose: int,
) -> None:
    """Clothing rental manager"""
    try:
        base = parse_log_level(log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")

    settings = Settings(
        data_dir=data_dir,
        currency=currency.upper(),
        log_level=verbosity_to_level(verbose, base),
    )
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group("set")
def clothing_set() -> None:
    """Manage clothing sets."""


@cli.group()
def order() -> None:
    """Manage rental orders."""


@cli.group()
def availability() -> None:
    """Check free units of a clothing set."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_seed)
category.add_command(category_show)
category.add_command(category_update)
clothing_set.add_command(set_add)
clothing_set.add_command(set_list)
clothing_set.add_command(set_remove)
clothing_set.add_command(set_show)
clothing_set.add_command(set_update)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_return)
order.add_command(order_ship)
order.add_command(order_show)
order.add_command(order_status)
availability.add_command(availability_check)
availability.add_command(availability_quantity)
cli.add_command(dashboard_show)
cli.add_command(calendar_show)
