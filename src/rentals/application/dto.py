"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from rentals.domain.model.order import Order


@dataclass(frozen=True)
class OrderDraft:
    """Input: the customer and rental dates for a new order."""

    customer_name: str
    customer_phone: str
    start_date: date
    end_date: date
    customer_email: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which clothing set, how many, and optionally at what daily price.

    Without ``price_per_day`` the set's current price is used.
    """

    clothing_set_id: int
    quantity: int
    price_per_day: str | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line of an order as displayed to the user."""

    id: int | None
    clothing_set_id: int
    set_name: str
    quantity: int
    price_per_day: str  # formatted, e.g. "150,000.00 VND"
    total_price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    customer_name: str
    customer_phone: str
    customer_email: str | None
    start_date: str
    end_date: str
    rental_days: int
    status: str
    items: list[OrderItemDTO]
    total_amount: str
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class AvailabilityDTO:
    """Output: free units of a set over a range, next to its total."""

    clothing_set_id: int
    available: bool
    available_quantity: int
    total_quantity: int


@dataclass(frozen=True)
class QuantityCheckDTO:
    """Output: whether a requested number of units can be booked."""

    clothing_set_id: int
    available: bool
    available_quantity: int
    requested_quantity: int


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        customer_email=order.customer_email,
        start_date=order.period.start.isoformat(),
        end_date=order.period.end.isoformat(),
        rental_days=order.period.days,
        status=order.status.value,
        items=[
            OrderItemDTO(
                id=item.id,
                clothing_set_id=item.clothing_set_id,
                set_name=item.set_name,
                quantity=item.quantity.value,
                price_per_day=str(item.price_per_day),
                total_price=str(item.total_price),
            )
            for item in order.items
        ],
        total_amount=str(order.total_amount),
        notes=order.notes,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
