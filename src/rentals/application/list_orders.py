"""Application service: List Orders use case (query).

Newest orders first, optionally narrowed to a single status.
"""

from __future__ import annotations

from rentals.application.dto import OrderDTO, order_to_dto
from rentals.domain.model.order import OrderStatus
from rentals.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None) -> list[OrderDTO]:
        wanted = OrderStatus.parse(status) if status else None
        orders = [
            order
            for order in self._order_repo.list_all()
            if wanted is None or order.status == wanted
        ]
        orders.sort(key=lambda o: (o.created_at, o.id or 0), reverse=True)
        return [order_to_dto(order) for order in orders]
