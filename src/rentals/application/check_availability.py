"""Application service: Check Availability use cases (queries).

Two forms, both read-only:

- ``handle`` reports free units next to the set's total and fails for an
  unknown set.
- ``handle_quantity`` answers whether a given number of units can be
  booked; an unknown set simply has nothing available.
"""

from __future__ import annotations

from datetime import date

from rentals.application.dto import AvailabilityDTO, QuantityCheckDTO
from rentals.domain.model.value_objects import Quantity
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.domain.repository.order_repository import OrderRepository
from rentals.domain.service.availability_service import AvailabilityService


class CheckAvailabilityHandler:

    def __init__(
        self,
        clothing_set_repo: ClothingSetRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._svc = AvailabilityService(clothing_set_repo, order_repo)

    def handle(self, clothing_set_id: int, start: date, end: date) -> AvailabilityDTO:
        report = self._svc.check(clothing_set_id, start, end)
        return AvailabilityDTO(
            clothing_set_id=report.clothing_set_id,
            available=report.available,
            available_quantity=report.available_quantity,
            total_quantity=report.total_quantity,
        )

    def handle_quantity(
        self,
        clothing_set_id: int,
        start: date,
        end: date,
        requested: int,
    ) -> QuantityCheckDTO:
        check = self._svc.check_quantity(
            clothing_set_id, start, end, Quantity(requested).value
        )
        return QuantityCheckDTO(
            clothing_set_id=check.clothing_set_id,
            available=check.available,
            available_quantity=check.available_quantity,
            requested_quantity=check.requested_quantity,
        )
