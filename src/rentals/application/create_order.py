"""Application service: Create Order use case (admission).

Orchestrates the flow between repositories, the availability service and
the Order aggregate:

1. Validate the dates and every requested line.
2. Resolve each clothing set and snapshot its price.
3. Let the Order aggregate validate the customer fields.
4. Under the per-set locks, check availability for every line and only
   then persist the order. A short line rejects the whole order.
"""

from __future__ import annotations

import logging

from rentals.application.dto import OrderDraft, OrderDTO, OrderItemSpec, order_to_dto
from rentals.application.locks import SetLockRegistry, admission_locks
from rentals.domain.exceptions import (
    EntityNotFoundError,
    InsufficientInventoryError,
    ValidationError,
)
from rentals.domain.model.order import Order, OrderItem
from rentals.domain.model.value_objects import Money, Quantity, RentalPeriod
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.domain.repository.order_repository import OrderRepository
from rentals.domain.service.availability_service import (
    AvailabilityService,
    RequestedLine,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clothing_set_repo: ClothingSetRepository,
        locks: SetLockRegistry | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._clothing_set_repo = clothing_set_repo
        self._locks = locks if locks is not None else admission_locks

    def handle(self, draft: OrderDraft, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Admit a new rental order or raise without persisting anything."""
        period = RentalPeriod(draft.start_date, draft.end_date)
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        items = [self._build_item(spec, period) for spec in item_specs]

        order = Order.create(
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            period=period,
            items=items,
            customer_email=draft.customer_email,
            notes=draft.notes,
        )

        svc = AvailabilityService(self._clothing_set_repo, self._order_repo)
        lines = [
            RequestedLine(item.clothing_set_id, item.quantity.value)
            for item in order.items
        ]

        with self._locks.hold(line.clothing_set_id for line in lines):
            try:
                svc.ensure_available(lines, period.start, period.end)
            except InsufficientInventoryError as exc:
                logger.warning(
                    "Rejected order for %s (%s): %s",
                    order.customer_name,
                    period,
                    exc,
                )
                raise
            self._order_repo.save(order)

        logger.info(
            "Admitted order %s for %s (%s), total %s",
            order.order_number,
            order.customer_name,
            period,
            order.total_amount,
        )
        return order_to_dto(order)

    # --- Helpers --------------------------------------------------------------

    def _build_item(self, spec: OrderItemSpec, period: RentalPeriod) -> OrderItem:
        quantity = Quantity(spec.quantity)

        clothing_set = self._clothing_set_repo.get_by_id(spec.clothing_set_id)
        if clothing_set is None or not clothing_set.is_active:
            raise EntityNotFoundError(
                f"Clothing set #{spec.clothing_set_id} not found"
            )

        if spec.price_per_day is None:
            price = clothing_set.price_per_day  # <-- price snapshot
        else:
            price = Money.of(spec.price_per_day, clothing_set.price_per_day.currency)

        return OrderItem(
            clothing_set_id=clothing_set.id,  # type: ignore[arg-type]
            set_name=clothing_set.name,
            quantity=quantity,
            price_per_day=price,
            rental_days=period.days,
        )
