"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from rentals.application.create_order import CreateOrderHandler
from rentals.application.dto import OrderDraft, OrderDTO, OrderItemSpec
from rentals.application.list_orders import ListOrdersHandler
from rentals.application.show_order import ShowOrderHandler
from rentals.application.update_order_status import UpdateOrderStatusHandler
from rentals.domain.exceptions import DomainException
from rentals.domain.model.order import OrderStatus
from rentals.infrastructure.bootstrap import clothing_set_repository, order_repository
from rentals.infrastructure.config import Settings

DATE = click.DateTime(formats=["%Y-%m-%d"])


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '3:2,5:1@200000' into OrderItemSpec list (set id, qty, optional price)."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SetId:Quantity[@PricePerDay]'."
            )
        set_str, rest = pair.split(":", 1)
        qty_str, _, price = rest.partition("@")
        try:
            set_id = int(set_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid set id or quantity in '{pair}'."
            )
        specs.append(
            OrderItemSpec(
                clothing_set_id=set_id,
                quantity=qty,
                price_per_day=price.strip() or None,
            )
        )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (id={dto.id}, status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}  {dto.customer_phone}")
    if dto.customer_email:
        click.echo(f"Email:    {dto.customer_email}")
    click.echo(f"Rental:   {dto.start_date} .. {dto.end_date}  ({dto.rental_days} days)")
    click.echo(f"Created:  {dto.created_at}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Set':<24} {'Qty':>4} {'Per day':>18} {'Total':>20}")
    click.echo(f"  {'-'*69}")
    for item in dto.items:
        click.echo(
            f"  {item.set_name:<24} {item.quantity:>4} "
            f"{item.price_per_day:>18} {item.total_price:>20}"
        )
    click.echo(f"  {'-'*69}")
    click.echo(f"  {'Order Total':<29} {dto.total_amount:>39}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Customer phone number.")
@click.option("--email", default=None, help="Customer email (optional).")
@click.option("--start", "start", required=True, type=DATE, help="First rental day (YYYY-MM-DD).")
@click.option("--end", "end", required=True, type=DATE, help="Last rental day (YYYY-MM-DD).")
@click.option("--items", required=True, help="Items as 'SetId:Qty[@Price],SetId:Qty'.")
@click.option("--notes", default=None, help="Free-text notes.")
@click.pass_obj
def order_create(
    settings: Settings,
    customer: str,
    phone: str,
    email: str | None,
    start: datetime,
    end: datetime,
    items: str,
    notes: str | None,
) -> None:
    """Create a rental order (checks availability first)."""
    specs = _parse_items(items)
    draft = OrderDraft(
        customer_name=customer,
        customer_phone=phone,
        customer_email=email,
        start_date=start.date(),
        end_date=end.date(),
        notes=notes,
    )

    handler = CreateOrderHandler(
        order_repo=order_repository(settings),
        clothing_set_repo=clothing_set_repository(settings),
    )

    try:
        dto = handler.handle(draft, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders in this status.",
)
@click.pass_obj
def order_list(settings: Settings, status: str | None) -> None:
    """List orders, newest first."""
    orders = ListOrdersHandler(order_repo=order_repository(settings)).handle(status)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Number':<14} {'Customer':<20} {'Dates':<24} {'Status':<10} {'Total':>20}")
    click.echo("-" * 98)
    for o in orders:
        click.echo(
            f"{o.id:<5} {o.order_number:<14} {o.customer_name:<20} "
            f"{o.start_date + '..' + o.end_date:<24} {o.status:<10} {o.total_amount:>20}"
        )


def _change_status(settings: Settings, order_id: int, status: str) -> OrderDTO:
    handler = UpdateOrderStatusHandler(order_repo=order_repository(settings))
    try:
        return handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "status", required=True, help="New status.")
@click.pass_obj
def order_status(settings: Settings, order_id: int, status: str) -> None:
    """Move an order to a new status."""
    dto = _change_status(settings, order_id, status)
    click.echo(f"Order {dto.order_number} is now {dto.status}.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_ship(settings: Settings, order_id: int) -> None:
    """Mark an order as shipped."""
    dto = _change_status(settings, order_id, OrderStatus.SHIPPED.value)
    click.echo(f"Order {dto.order_number} shipped.")


@click.command("return")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_return(settings: Settings, order_id: int) -> None:
    """Mark an order as returned (frees its units)."""
    dto = _change_status(settings, order_id, OrderStatus.RETURNED.value)
    click.echo(f"Order {dto.order_number} returned.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_cancel(settings: Settings, order_id: int) -> None:
    """Cancel an order (frees its units)."""
    dto = _change_status(settings, order_id, OrderStatus.CANCELLED.value)
    click.echo(f"Order {dto.order_number} cancelled.")
