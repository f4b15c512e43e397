"""Unit tests for the Category and ClothingSet aggregates."""

import pytest

from rentals.domain.exceptions import ValidationError
from rentals.domain.model.category import Category
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.value_objects import Money


class TestCategory:

    def test_create_trims_fields(self):
        category = Category.create("  Vest nam ", "  ")
        assert category.name == "Vest nam"
        assert category.description is None
        assert category.is_active

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Category name is required"):
            Category.create("   ")

    def test_overlong_name_rejected(self):
        with pytest.raises(ValidationError, match="at most 80"):
            Category.create("x" * 81)

    def test_matches_is_case_insensitive(self):
        assert Category.create("Áo dài").matches("  ÁO DÀI ")

    def test_deactivate_twice_rejected(self):
        category = Category.create("Vest nam")
        category.deactivate()
        assert not category.is_active
        with pytest.raises(ValidationError, match="already deleted"):
            category.deactivate()


class TestClothingSet:

    def _make(self, **overrides) -> ClothingSet:
        kwargs = dict(
            name="Vest A",
            category="Vest nam",
            quantity=3,
            price_per_day=Money.of("150000"),
        )
        kwargs.update(overrides)
        return ClothingSet.create(**kwargs)

    def test_create(self):
        s = self._make(image_url=" /img/vest.jpg ")
        assert s.id is None
        assert s.quantity == 3
        assert s.image_url == "/img/vest.jpg"
        assert s.is_active

    def test_free_set_allowed(self):
        assert self._make(price_per_day=Money.of("0")).price_per_day.is_zero

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_at_least_one(self, quantity):
        with pytest.raises(ValidationError, match="at least one unit"):
            self._make(quantity=quantity)

    def test_quantity_must_be_integer(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            self._make(quantity=2.5)

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError, match="Category is required"):
            self._make(category=" ")

    def test_price_update_keeps_other_fields(self):
        s = self._make()
        s.update_price(Money.of("99000"))
        assert s.price_per_day == Money.of("99000")
        assert s.quantity == 3

    def test_update_details_ignores_missing_fields(self):
        s = self._make(description="Black wool")
        s.update_details(image_url="/img/new.jpg")
        assert s.description == "Black wool"
        assert s.image_url == "/img/new.jpg"

    def test_deactivate(self):
        s = self._make()
        s.deactivate()
        assert not s.is_active
        with pytest.raises(ValidationError, match="already removed"):
            s.deactivate()
