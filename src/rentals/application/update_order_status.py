"""Application service: Update Order Status use case.

The status string is checked against the known statuses before the order
is looked up, and the Order aggregate rejects moves its lifecycle does not
allow (for example anything out of ``returned``).
"""

from __future__ import annotations

import logging

from rentals.application.dto import OrderDTO, order_to_dto
from rentals.domain.exceptions import EntityNotFoundError
from rentals.domain.model.order import OrderStatus
from rentals.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderDTO:
        target = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.transition_to(target)
        self._order_repo.save(order)

        logger.info(
            "Order %s moved from %s to %s",
            order.label,
            previous.value,
            target.value,
        )
        return order_to_dto(order)
