"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from rentals.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in no particular order."""

    @abstractmethod
    def list_overlapping(self, start: date, end: date) -> list[Order]:
        """Return orders of any status whose period shares a day with [start, end]."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order together with its items.

        New orders (``id is None``) get their ``id``, ``order_number`` and
        item IDs assigned here. The order and its items are written as one
        unit.
        """
