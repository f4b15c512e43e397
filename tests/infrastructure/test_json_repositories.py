"""Tests for the JSON-file repositories, using pytest's tmp_path."""

import json
from datetime import date, datetime, timezone

from rentals.domain.model.category import Category
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.order import Order, OrderItem, OrderStatus
from rentals.domain.model.value_objects import Money, Quantity, RentalPeriod
from rentals.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from rentals.infrastructure.persistence.json_clothing_set_repository import (
    JsonClothingSetRepository,
)
from rentals.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def _order(start: date, end: date, created_year: int = 2024) -> Order:
    period = RentalPeriod(start, end)
    return Order(
        id=None,
        customer_name="Alice",
        customer_phone="0901234567",
        period=period,
        items=[
            OrderItem(
                clothing_set_id=1,
                set_name="Vest A",
                quantity=Quantity(2),
                price_per_day=Money.of("100000"),
                rental_days=period.days,
            )
        ],
        created_at=datetime(created_year, 3, 1, tzinfo=timezone.utc),
    )


class TestJsonCategoryRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "categories.json"
        JsonCategoryRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "categories.json"
        repo = JsonCategoryRepository(path)
        category = Category.create("Áo dài", "Traditional dress")
        repo.save(category)

        reloaded = JsonCategoryRepository(path).get_by_id(category.id)
        assert reloaded.name == "Áo dài"
        assert reloaded.description == "Traditional dress"
        assert reloaded.created_at == category.created_at
        assert "Áo dài" in path.read_text(encoding="utf-8")

    def test_inactive_hidden_by_default(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        first, second = Category.create("A"), Category.create("B")
        repo.save(first)
        repo.save(second)
        second.deactivate()
        repo.save(second)

        assert [c.name for c in repo.list_all()] == ["A"]
        assert len(repo.list_all(include_inactive=True)) == 2
        assert repo.get_by_name("b") is None


class TestJsonClothingSetRepository:

    def test_save_update_and_filter(self, tmp_path):
        repo = JsonClothingSetRepository(tmp_path / "sets.json")
        vest = ClothingSet.create("Vest A", "Vest nam", 3, Money.of("150000"))
        dress = ClothingSet.create("Dress", "Đầm dạ hội", 1, Money.of("300000"))
        repo.save(vest)
        repo.save(dress)
        assert (vest.id, dress.id) == (1, 2)

        vest.set_quantity(4)
        repo.save(vest)

        reloaded = repo.get_by_id(1)
        assert reloaded.quantity == 4
        assert reloaded.price_per_day == Money.of("150000")
        assert [s.name for s in repo.list_by_category("vest NAM")] == ["Vest A"]
        assert len(repo.list_all()) == 2


class TestJsonOrderRepository:

    def test_assigns_id_number_and_item_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first = _order(date(2024, 7, 1), date(2024, 7, 5))
        second = _order(date(2024, 7, 2), date(2024, 7, 3), created_year=2025)
        repo.save(first)
        repo.save(second)

        assert first.order_number == "ORD-2024-001"
        assert second.order_number == "ORD-2025-002"
        assert first.items[0].id == 1
        assert second.items[0].id == 2

    def test_round_trip_keeps_snapshot_and_status(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        order = _order(date(2024, 7, 1), date(2024, 7, 5))
        repo.save(order)
        order.mark_shipped()
        repo.save(order)

        reloaded = JsonOrderRepository(path).get_by_id(order.id)
        assert reloaded.status == OrderStatus.SHIPPED
        assert reloaded.order_number == order.order_number
        assert reloaded.period == order.period
        assert reloaded.items[0].price_per_day == Money.of("100000")
        assert reloaded.total_amount == Money.of("1000000")

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert len(raw) == 1
        assert raw[0]["total_amount"] == "1000000"
        assert raw[0]["items"][0]["total_price"] == "1000000"

    def test_list_overlapping_is_closed_interval(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        june = _order(date(2024, 6, 1), date(2024, 6, 10))
        july = _order(date(2024, 7, 1), date(2024, 7, 5))
        repo.save(june)
        repo.save(july)

        hits = repo.list_overlapping(date(2024, 6, 10), date(2024, 6, 20))
        assert [o.id for o in hits] == [june.id]
        assert repo.list_overlapping(date(2024, 6, 11), date(2024, 6, 30)) == []

    def test_no_temp_files_left_behind(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(_order(date(2024, 7, 1), date(2024, 7, 5)))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["orders.json"]
