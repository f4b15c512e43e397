"""JSON-file-backed implementation of OrderRepository.

Items are stored inside their order's record, so an order and its items
are always written together in one file replacement.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from rentals.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    format_order_number,
    order_number_sequence,
)
from rentals.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Quantity,
    RentalPeriod,
)
from rentals.domain.repository.order_repository import OrderRepository
from rentals.infrastructure.persistence.json_file import JsonRecordFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def list_overlapping(self, start: date, end: date) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if date.fromisoformat(raw["start_date"]) <= end
            and date.fromisoformat(raw["end_date"]) >= start
        ]

    def save(self, order: Order) -> None:
        with self._file.locked():
            records = self._file.load()

            if order.id is None:
                order.id = self._file.next_id(records)
                order.order_number = format_order_number(
                    order.created_at.year, self._next_sequence(records)
                )

            next_item_id = self._next_item_id(records)
            for item in order.items:
                if item.id is None:
                    item.id = next_item_id
                    next_item_id += 1

            self._file.upsert(records, self._to_raw(order))
            self._file.persist(records)

    # --- Sequences ------------------------------------------------------------

    @staticmethod
    def _next_sequence(records: list[dict]) -> int:
        return max(
            (order_number_sequence(r["order_number"]) for r in records),
            default=0,
        ) + 1

    @staticmethod
    def _next_item_id(records: list[dict]) -> int:
        return max(
            (i["id"] for r in records for i in r["items"]),
            default=0,
        ) + 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "customer_phone": order.customer_phone,
            "customer_email": order.customer_email,
            "start_date": order.period.start.isoformat(),
            "end_date": order.period.end.isoformat(),
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "notes": order.notes,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "clothing_set_id": item.clothing_set_id,
                    "set_name": item.set_name,
                    "quantity": item.quantity.value,
                    "price_per_day": str(item.price_per_day.amount),
                    "currency": item.price_per_day.currency,
                    "rental_days": item.rental_days,
                    "total_price": str(item.total_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        period = RentalPeriod(
            date.fromisoformat(raw["start_date"]),
            date.fromisoformat(raw["end_date"]),
        )
        items = [
            OrderItem(
                id=i["id"],
                clothing_set_id=i["clothing_set_id"],
                set_name=i["set_name"],
                quantity=Quantity(i["quantity"]),
                price_per_day=Money(
                    Decimal(i["price_per_day"]), i.get("currency", DEFAULT_CURRENCY)
                ),
                rental_days=i.get("rental_days", period.days),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            customer_name=raw["customer_name"],
            customer_phone=raw["customer_phone"],
            customer_email=raw.get("customer_email"),
            period=period,
            items=items,
            status=OrderStatus(raw["status"]),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
