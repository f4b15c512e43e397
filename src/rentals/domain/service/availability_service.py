"""Domain service: Availability.

Works out how many units of a clothing set are free over a date range.
Nothing about availability is stored: every answer is derived from the
clothing set's total ``quantity`` and the orders that currently hold
inventory, so the figure can never drift out of sync with the ledger.

An order holds inventory unless it is cancelled or returned, and it
conflicts with a query when the two closed date ranges share at least one
day. A booking that ends on the 10th conflicts with one starting on the 10th.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from rentals.domain.exceptions import (
    EntityNotFoundError,
    InsufficientInventoryError,
)
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityReport:
    clothing_set_id: int
    available_quantity: int
    total_quantity: int

    @property
    def available(self) -> bool:
        return self.available_quantity > 0


@dataclass(frozen=True)
class QuantityCheck:
    clothing_set_id: int
    available_quantity: int
    requested_quantity: int

    @property
    def available(self) -> bool:
        return self.available_quantity >= self.requested_quantity


@dataclass(frozen=True)
class RequestedLine:
    """A clothing set and how many units of it someone wants."""

    clothing_set_id: int
    quantity: int


class AvailabilityService:

    def __init__(
        self,
        clothing_set_repo: ClothingSetRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._clothing_set_repo = clothing_set_repo
        self._order_repo = order_repo

    def available_quantity(self, clothing_set_id: int, start: date, end: date) -> int:
        """Units of the set not reserved by any conflicting order.

        Returns 0 for an unknown set. The range is taken as given; callers
        are responsible for ``start <= end``.
        """
        clothing_set = self._clothing_set_repo.get_by_id(clothing_set_id)
        if clothing_set is None:
            logger.debug("Availability of unknown set #%s is 0", clothing_set_id)
            return 0

        reserved = self.reserved_quantity(clothing_set_id, start, end)
        available = max(0, clothing_set.quantity - reserved)
        logger.debug(
            "Set #%s %s..%s: total=%d reserved=%d available=%d",
            clothing_set_id,
            start,
            end,
            clothing_set.quantity,
            reserved,
            available,
        )
        return available

    def reserved_quantity(self, clothing_set_id: int, start: date, end: date) -> int:
        """Units of the set held by inventory-holding orders overlapping the range."""
        return sum(
            order.reserved_quantity(clothing_set_id)
            for order in self._order_repo.list_overlapping(start, end)
            if order.holds_inventory
        )

    def check(self, clothing_set_id: int, start: date, end: date) -> AvailabilityReport:
        """Availability together with the set's total; the set must exist."""
        clothing_set = self._clothing_set_repo.get_by_id(clothing_set_id)
        if clothing_set is None:
            raise EntityNotFoundError(f"Clothing set #{clothing_set_id} not found")
        return AvailabilityReport(
            clothing_set_id=clothing_set_id,
            available_quantity=self.available_quantity(clothing_set_id, start, end),
            total_quantity=clothing_set.quantity,
        )

    def check_quantity(
        self,
        clothing_set_id: int,
        start: date,
        end: date,
        requested: int,
    ) -> QuantityCheck:
        """Can *requested* units be booked? Never raises for a missing set."""
        return QuantityCheck(
            clothing_set_id=clothing_set_id,
            available_quantity=self.available_quantity(clothing_set_id, start, end),
            requested_quantity=requested,
        )

    def ensure_available(
        self,
        lines: list[RequestedLine],
        start: date,
        end: date,
    ) -> None:
        """Raise InsufficientInventoryError unless every line can be booked.

        Lines naming the same set are summed first, so an order cannot slip
        past the check by splitting one set over several lines. Nothing is
        mutated here; the caller persists only after this returns.
        """
        wanted: dict[int, int] = {}
        for line in lines:
            wanted[line.clothing_set_id] = wanted.get(line.clothing_set_id, 0) + line.quantity

        for clothing_set_id, requested in wanted.items():
            available = self.available_quantity(clothing_set_id, start, end)
            if available < requested:
                clothing_set = self._clothing_set_repo.get_by_id(clothing_set_id)
                name = clothing_set.name if clothing_set else f"#{clothing_set_id}"
                raise InsufficientInventoryError(
                    clothing_set_id=clothing_set_id,
                    set_name=name,
                    available=available,
                    requested=requested,
                )
