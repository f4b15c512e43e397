"""ClothingSet aggregate.

A clothing set is the unit customers rent. ``quantity`` is the number of
identical units the shop owns. It is never touched by bookings: how many
units are free on given dates is always derived from the order ledger by
the availability service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rentals.domain.exceptions import ValidationError
from rentals.domain.model.value_objects import Money


def _require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _require_quantity(quantity: int) -> int:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 1:
        raise ValidationError("A clothing set must own at least one unit")
    return quantity


@dataclass
class ClothingSet:
    """Aggregate root for a rentable clothing set.

    Use ``ClothingSet.create()`` for new sets. The plain constructor is
    left unvalidated so repositories can reconstitute stored records.
    """

    id: int | None
    name: str
    category: str  # category *name*, not an id
    quantity: int
    price_per_day: Money
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        category: str,
        quantity: int,
        price_per_day: Money,
        description: str | None = None,
        image_url: str | None = None,
    ) -> ClothingSet:
        return ClothingSet(
            id=None,
            name=_require_text(name, "Clothing set name"),
            category=_require_text(category, "Category"),
            quantity=_require_quantity(quantity),
            price_per_day=price_per_day,
            description=(description or "").strip() or None,
            image_url=(image_url or "").strip() or None,
        )

    # --- Mutations ------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = _require_text(name, "Clothing set name")

    def recategorise(self, category: str) -> None:
        self.category = _require_text(category, "Category")

    def set_quantity(self, quantity: int) -> None:
        """Change the number of owned units.

        Existing bookings are not re-checked: lowering the quantity below
        what is already booked simply drives availability to zero.
        """
        self.quantity = _require_quantity(quantity)

    def update_price(self, price_per_day: Money) -> None:
        """Change the daily price. Existing orders keep their snapshot."""
        self.price_per_day = price_per_day

    def update_details(
        self,
        description: str | None = None,
        image_url: str | None = None,
    ) -> None:
        if description is not None:
            self.description = description.strip() or None
        if image_url is not None:
            self.image_url = image_url.strip() or None

    def deactivate(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Clothing set '{self.name}' is already removed")
        self.is_active = False
