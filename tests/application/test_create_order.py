"""Integration tests for the CreateOrder use case (admission).

Uses in-memory fake repositories, no file I/O.
"""

from datetime import date

import pytest

from rentals.application.create_order import CreateOrderHandler
from rentals.application.dto import OrderDraft, OrderItemSpec
from rentals.application.locks import SetLockRegistry
from rentals.application.update_order_status import UpdateOrderStatusHandler
from rentals.domain.exceptions import (
    EntityNotFoundError,
    InsufficientInventoryError,
    ValidationError,
)
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.value_objects import Money
from rentals.domain.service.availability_service import AvailabilityService
from tests.fakes import FakeClothingSetRepository, FakeOrderRepository


def _setup(
    sets: list[ClothingSet] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeClothingSetRepository]:
    """Build handler with fake repos, optionally pre-loaded with clothing sets."""
    if sets is None:
        sets = [
            ClothingSet(id=1, name="Vest A", category="Vest nam", quantity=3,
                        price_per_day=Money.of("100000")),
            ClothingSet(id=2, name="Ao dai B", category="Áo dài", quantity=1,
                        price_per_day=Money.of("80000")),
        ]
    order_repo = FakeOrderRepository()
    set_repo = FakeClothingSetRepository(sets)
    handler = CreateOrderHandler(order_repo, set_repo, locks=SetLockRegistry())
    return handler, order_repo, set_repo


def _draft(start: date = date(2024, 7, 1), end: date = date(2024, 7, 5), **overrides) -> OrderDraft:
    kwargs = dict(
        customer_name="Alice",
        customer_phone="0901234567",
        start_date=start,
        end_date=end,
    )
    kwargs.update(overrides)
    return OrderDraft(**kwargs)


def _available(order_repo, set_repo, set_id, start, end) -> int:
    return AvailabilityService(set_repo, order_repo).available_quantity(set_id, start, end)


class TestCreateOrderHappyPath:

    def test_creates_upcoming_order_with_number(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_draft(), [OrderItemSpec(1, 2)])

        assert dto.status == "upcoming"
        assert dto.order_number.startswith("ORD-")
        assert dto.rental_days == 5
        assert len(dto.items) == 1
        assert order_repo.get_by_id(dto.id) is not None

    def test_total_uses_days_quantity_and_price(self):
        handler, _, _ = _setup()
        dto = handler.handle(_draft(), [OrderItemSpec(1, 2), OrderItemSpec(2, 1)])
        # (2 * 100k + 1 * 80k) * 5 days
        assert dto.total_amount == "1,400,000.00 VND"

    def test_explicit_line_price_is_used(self):
        handler, _, _ = _setup()
        dto = handler.handle(_draft(), [OrderItemSpec(1, 1, price_per_day="90000")])
        assert dto.items[0].price_per_day == "90,000.00 VND"

    def test_item_ids_assigned(self):
        handler, _, _ = _setup()
        dto = handler.handle(_draft(), [OrderItemSpec(1, 1), OrderItemSpec(2, 1)])
        assert [i.id for i in dto.items] == [1, 2]


class TestCleanBookingScenario:
    """Vest A owns 3 units and starts with no orders."""

    def test_clean_booking_then_exhaustion_then_other_month(self):
        handler, order_repo, set_repo = _setup()
        july = (date(2024, 7, 1), date(2024, 7, 5))

        assert _available(order_repo, set_repo, 1, *july) == 3
        assert _available(order_repo, set_repo, 1, date(2030, 1, 1), date(2030, 2, 1)) == 3

        handler.handle(_draft(*july), [OrderItemSpec(1, 2)])
        assert _available(order_repo, set_repo, 1, date(2024, 7, 3), date(2024, 7, 8)) == 1

        # Exhaustion: 2 more on an overlapping range is refused, nothing stored.
        with pytest.raises(InsufficientInventoryError) as excinfo:
            handler.handle(
                _draft(date(2024, 7, 4), date(2024, 7, 6), customer_name="Bob"),
                [OrderItemSpec(1, 2)],
            )
        assert excinfo.value.available == 1
        assert excinfo.value.requested == 2
        assert len(order_repo.list_all()) == 1

        # Non-overlapping dates: all 3 units are free in August.
        handler.handle(
            _draft(date(2024, 8, 1), date(2024, 8, 3), customer_name="Carol"),
            [OrderItemSpec(1, 3)],
        )
        assert len(order_repo.list_all()) == 2
        assert _available(order_repo, set_repo, 1, *july) == 1


class TestCreateOrderAtomicity:

    def test_one_short_line_rejects_whole_order(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(InsufficientInventoryError, match="Ao dai B"):
            handler.handle(_draft(), [OrderItemSpec(1, 1), OrderItemSpec(2, 2)])
        assert order_repo.list_all() == []
        assert order_repo.save_calls == 0

    def test_split_lines_cannot_overbook(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(InsufficientInventoryError):
            handler.handle(_draft(), [OrderItemSpec(2, 1), OrderItemSpec(2, 1)])
        assert order_repo.list_all() == []

    def test_cancelled_order_frees_units_for_new_booking(self):
        handler, order_repo, _ = _setup()
        first = handler.handle(_draft(), [OrderItemSpec(2, 1)])
        UpdateOrderStatusHandler(order_repo).handle(first.id, "cancelled")

        second = handler.handle(_draft(customer_name="Bob"), [OrderItemSpec(2, 1)])
        assert second.id != first.id


class TestCreateOrderPriceSnapshot:

    def test_price_change_does_not_reach_existing_order(self):
        handler, order_repo, set_repo = _setup()
        dto = handler.handle(_draft(), [OrderItemSpec(1, 1)])

        vest = set_repo.get_by_id(1)
        vest.update_price(Money.of("999000"))
        set_repo.save(vest)

        saved = order_repo.get_by_id(dto.id)
        assert saved.items[0].price_per_day == Money.of("100000")
        assert saved.total_amount == Money.of("500000")


class TestCreateOrderValidation:

    def test_unknown_set_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="#99 not found"):
            handler.handle(_draft(), [OrderItemSpec(99, 1)])

    def test_removed_set_rejected(self):
        handler, _, set_repo = _setup()
        set_repo.get_by_id(1).deactivate()
        with pytest.raises(EntityNotFoundError):
            handler.handle(_draft(), [OrderItemSpec(1, 1)])

    def test_end_not_after_start_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be after"):
            handler.handle(_draft(date(2024, 7, 5), date(2024, 7, 5)), [OrderItemSpec(1, 1)])

    def test_no_items_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(_draft(), [])

    def test_zero_quantity_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_draft(), [OrderItemSpec(1, 0)])

    def test_negative_price_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(_draft(), [OrderItemSpec(1, 1, price_per_day="-5")])

    def test_zero_price_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            handler.handle(_draft(), [OrderItemSpec(1, 1, price_per_day="0")])

    def test_missing_customer_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Customer name"):
            handler.handle(_draft(customer_name=""), [OrderItemSpec(1, 1)])
        assert order_repo.list_all() == []

    def test_bad_phone_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid phone"):
            handler.handle(_draft(customer_phone="123"), [OrderItemSpec(1, 1)])

    def test_mixed_currency_sets_rejected_before_saving(self):
        handler, order_repo, _ = _setup([
            ClothingSet(id=1, name="Vest A", category="Vest nam", quantity=3,
                        price_per_day=Money.of("100000")),
            ClothingSet(id=2, name="Tux", category="Vest nam", quantity=3,
                        price_per_day=Money.of("12", "USD")),
        ])
        with pytest.raises(ValidationError, match="share one currency"):
            handler.handle(_draft(), [OrderItemSpec(1, 1), OrderItemSpec(2, 1)])
        assert order_repo.save_calls == 0
