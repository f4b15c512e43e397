"""Application service: Calendar events (query).

Projects orders onto a month view: one event per rented day of every
non-cancelled order that overlaps the month. Days outside the month are
left out.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from rentals.domain.exceptions import ValidationError
from rentals.domain.model.order import Order, OrderStatus
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.domain.repository.order_repository import OrderRepository


@dataclass(frozen=True)
class CalendarItemDTO:
    name: str
    category: str | None
    quantity: int


@dataclass(frozen=True)
class CalendarEventDTO:
    id: str  # "<order id>-<YYYY-MM-DD>"
    order_id: int
    order_number: str
    title: str
    customer: str
    phone: str
    date: str
    start_date: str
    end_date: str
    status: str
    items: list[CalendarItemDTO]


class CalendarEventsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clothing_set_repo: ClothingSetRepository,
    ) -> None:
        self._order_repo = order_repo
        self._clothing_set_repo = clothing_set_repo

    def handle(self, year: int, month: int) -> list[CalendarEventDTO]:
        if not 1 <= month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {month}")
        first = date(year, month, 1)
        last = date(year, month, calendar.monthrange(year, month)[1])

        events: list[CalendarEventDTO] = []
        orders = sorted(
            self._order_repo.list_overlapping(first, last),
            key=lambda o: (o.period.start, o.id or 0),
        )
        for order in orders:
            if order.status == OrderStatus.CANCELLED:
                continue
            items = self._items(order)
            day = max(order.period.start, first)
            stop = min(order.period.end, last)
            while day <= stop:
                events.append(self._event(order, day, items))
                day += timedelta(days=1)
        return events

    def _items(self, order: Order) -> list[CalendarItemDTO]:
        result = []
        for item in order.items:
            clothing_set = self._clothing_set_repo.get_by_id(item.clothing_set_id)
            result.append(
                CalendarItemDTO(
                    name=item.set_name,
                    category=clothing_set.category if clothing_set else None,
                    quantity=item.quantity.value,
                )
            )
        return result

    @staticmethod
    def _event(order: Order, day: date, items: list[CalendarItemDTO]) -> CalendarEventDTO:
        return CalendarEventDTO(
            id=f"{order.id}-{day.isoformat()}",
            order_id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,  # type: ignore[arg-type]
            title=", ".join(item.name for item in items),
            customer=order.customer_name,
            phone=order.customer_phone,
            date=day.isoformat(),
            start_date=order.period.start.isoformat(),
            end_date=order.period.end.isoformat(),
            status=order.status.value,
            items=items,
        )
