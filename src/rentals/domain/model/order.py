"""Order aggregate: a customer's rental of one or more clothing sets.

The Order is an aggregate root that owns its items.
All business invariants are enforced here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from rentals.domain.exceptions import InvalidStatusError, ValidationError
from rentals.domain.model.value_objects import Money, Quantity, RentalPeriod


class OrderStatus(Enum):
    UPCOMING = "upcoming"
    SHIPPED = "shipped"
    ACTIVE = "active"
    RETURNED = "returned"
    CANCELLED = "cancelled"

    @property
    def holds_inventory(self) -> bool:
        """Whether an order in this status keeps its units reserved."""
        return self not in (OrderStatus.RETURNED, OrderStatus.CANCELLED)

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def can_become(self, target: OrderStatus) -> bool:
        return target in _TRANSITIONS[self]

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except (ValueError, AttributeError) as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise InvalidStatusError(
                f"Invalid status {raw!r}; expected one of: {allowed}"
            ) from exc


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.UPCOMING: frozenset(
        {OrderStatus.SHIPPED, OrderStatus.ACTIVE, OrderStatus.CANCELLED}
    ),
    OrderStatus.SHIPPED: frozenset(
        {OrderStatus.ACTIVE, OrderStatus.RETURNED, OrderStatus.CANCELLED}
    ),
    OrderStatus.ACTIVE: frozenset({OrderStatus.RETURNED, OrderStatus.CANCELLED}),
    OrderStatus.RETURNED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass
class OrderItem:
    """One clothing set on an order, with its price locked at booking time.

    ``price_per_day`` is a copy of the set's price when the order was
    admitted. Later price changes on the set never reach existing orders.
    """

    clothing_set_id: int
    set_name: str
    quantity: Quantity
    price_per_day: Money  # snapshot
    rental_days: int
    id: int | None = None

    @property
    def total_price(self) -> Money:
        return self.price_per_day * (self.quantity.value * self.rental_days)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50
MIN_PHONE_DIGITS = 10
ORDER_NUMBER_PREFIX = "ORD"

_PHONE_RE = re.compile(r"^\+?[\d\s().-]+$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_ORDER_NUMBER_RE = re.compile(rf"^{ORDER_NUMBER_PREFIX}-(\d{{4}})-(\d+)$")


def format_order_number(year: int, sequence: int) -> str:
    return f"{ORDER_NUMBER_PREFIX}-{year}-{sequence:03d}"


def order_number_sequence(order_number: str) -> int:
    """Extract the running sequence from an order number like ORD-2024-007."""
    match = _ORDER_NUMBER_RE.match(order_number)
    if match is None:
        raise ValidationError(f"Malformed order number: {order_number!r}")
    return int(match.group(2))


def _clean_phone(phone: str) -> str:
    phone = (phone or "").strip()
    digits = sum(ch.isdigit() for ch in phone)
    if not _PHONE_RE.match(phone) or digits < MIN_PHONE_DIGITS:
        raise ValidationError(f"Invalid phone number: {phone!r}")
    return phone


def _clean_email(email: str | None) -> str | None:
    email = (email or "").strip()
    if not email:
        return None
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"Invalid email address: {email!r}")
    return email


@dataclass
class Order:
    """Aggregate root for rental orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    customer_phone: str
    period: RentalPeriod
    items: list[OrderItem]
    customer_email: str | None = None
    notes: str | None = None
    status: OrderStatus = OrderStatus.UPCOMING
    order_number: str | None = None  # assigned by the repository
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_phone: str,
        period: RentalPeriod,
        items: list[OrderItem],
        customer_email: str | None = None,
        notes: str | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        currencies = sorted({item.price_per_day.currency for item in items})
        if len(currencies) > 1:
            raise ValidationError(
                f"All items of an order must share one currency, got {', '.join(currencies)}"
            )

        for item in items:
            if item.price_per_day.is_zero:
                raise ValidationError(
                    f"Price per day for '{item.set_name}' must be greater than zero"
                )
            if item.rental_days != period.days:
                raise ValidationError(
                    f"Item '{item.set_name}' is priced for {item.rental_days} days, "
                    f"but the rental lasts {period.days}"
                )

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            customer_phone=_clean_phone(customer_phone),
            customer_email=_clean_email(customer_email),
            period=period,
            items=list(items),
            notes=(notes or "").strip() or None,
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus) -> None:
        """Move to *target*, rejecting moves the lifecycle does not allow."""
        if not self.status.can_become(target):
            raise ValidationError(
                f"Cannot change order {self.label} from "
                f"{self.status.value} to {target.value}"
            )
        self.status = target

    def mark_shipped(self) -> None:
        self.transition_to(OrderStatus.SHIPPED)

    def mark_returned(self) -> None:
        self.transition_to(OrderStatus.RETURNED)

    def cancel(self) -> None:
        self.transition_to(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def label(self) -> str:
        return self.order_number or f"#{self.id}"

    @property
    def total_amount(self) -> Money:
        result = Money.zero(self.items[0].price_per_day.currency)
        for item in self.items:
            result = result + item.total_price
        return result

    @property
    def holds_inventory(self) -> bool:
        return self.status.holds_inventory

    def reserved_quantity(self, clothing_set_id: int) -> int:
        """Units of one clothing set this order keeps, ignoring status."""
        return sum(
            item.quantity.value
            for item in self.items
            if item.clothing_set_id == clothing_set_id
        )

    def is_running_on(self, day: date) -> bool:
        return self.period.contains(day)

    def is_overdue(self, today: date) -> bool:
        """Past its end date but never marked returned or cancelled."""
        return not self.status.is_terminal and self.period.end < today
