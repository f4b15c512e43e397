"""Concurrent writers sharing the JSON order file must not lose orders."""

import threading
import time
from datetime import date

import pytest

from rentals.application.create_order import CreateOrderHandler
from rentals.application.dto import OrderDraft, OrderItemSpec
from rentals.application.locks import SetLockRegistry
from rentals.application.update_order_status import UpdateOrderStatusHandler
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.order import OrderStatus
from rentals.domain.model.value_objects import Money
from rentals.infrastructure.persistence.json_clothing_set_repository import (
    JsonClothingSetRepository,
)
from rentals.infrastructure.persistence.json_file import JsonRecordFile
from rentals.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


@pytest.fixture
def slow_loads(monkeypatch):
    """Every file read sleeps, so unserialised writers would interleave."""
    original = JsonRecordFile.load

    def load(self):
        records = original(self)
        time.sleep(0.05)
        return records

    monkeypatch.setattr(JsonRecordFile, "load", load)


@pytest.fixture
def store(tmp_path):
    sets = JsonClothingSetRepository(tmp_path / "clothing_sets.json")
    sets.save(ClothingSet.create("Vest A", "Vest nam", 3, Money.of("100000")))
    sets.save(ClothingSet.create("Ao dai B", "Áo dài", 3, Money.of("80000")))
    return tmp_path


def _draft(name: str) -> OrderDraft:
    return OrderDraft(
        customer_name=name,
        customer_phone="0901234567",
        start_date=date(2024, 7, 1),
        end_date=date(2024, 7, 5),
    )


def _run_together(*targets) -> None:
    barrier = threading.Barrier(len(targets))
    errors: list[BaseException] = []

    def wrap(target):
        barrier.wait()
        try:
            target()
        except BaseException as exc:
            errors.append(exc)

    threads = [threading.Thread(target=wrap, args=(t,)) for t in targets]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert errors == []


class TestConcurrentOrderWrites:

    def test_admissions_for_different_sets_both_stored(self, store, slow_loads):
        locks = SetLockRegistry()
        admitted: list[str] = []

        def book(name: str, set_id: int):
            def run():
                handler = CreateOrderHandler(
                    JsonOrderRepository(store / "orders.json"),
                    JsonClothingSetRepository(store / "clothing_sets.json"),
                    locks=locks,
                )
                dto = handler.handle(_draft(name), [OrderItemSpec(set_id, 3)])
                admitted.append(dto.order_number)
            return run

        _run_together(book("Alice", 1), book("Bob", 2))

        stored = JsonOrderRepository(store / "orders.json").list_all()
        assert len(set(admitted)) == 2
        assert sorted(o.order_number for o in stored) == sorted(admitted)
        assert sorted(o.id for o in stored) == [1, 2]

    def test_status_change_alongside_admission_keeps_both(self, store, slow_loads):
        first = CreateOrderHandler(
            JsonOrderRepository(store / "orders.json"),
            JsonClothingSetRepository(store / "clothing_sets.json"),
            locks=SetLockRegistry(),
        ).handle(_draft("Alice"), [OrderItemSpec(1, 1)])

        def admit():
            CreateOrderHandler(
                JsonOrderRepository(store / "orders.json"),
                JsonClothingSetRepository(store / "clothing_sets.json"),
                locks=SetLockRegistry(),
            ).handle(_draft("Bob"), [OrderItemSpec(2, 1)])

        def ship():
            UpdateOrderStatusHandler(
                JsonOrderRepository(store / "orders.json")
            ).handle(first.id, "shipped")

        _run_together(admit, ship)

        repo = JsonOrderRepository(store / "orders.json")
        assert len(repo.list_all()) == 2
        assert repo.get_by_id(first.id).status == OrderStatus.SHIPPED
