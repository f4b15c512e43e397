"""Application service: Add Clothing Set use case."""

from __future__ import annotations

from rentals.domain.exceptions import EntityNotFoundError
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.value_objects import DEFAULT_CURRENCY, Money
from rentals.domain.repository.category_repository import CategoryRepository
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository


class AddClothingSetHandler:

    def __init__(
        self,
        clothing_set_repo: ClothingSetRepository,
        category_repo: CategoryRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._clothing_set_repo = clothing_set_repo
        self._category_repo = category_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        category: str,
        quantity: int,
        price_per_day: str,
        description: str | None = None,
        image_url: str | None = None,
    ) -> ClothingSet:
        """Add a clothing set under an existing, active category."""
        found = self._category_repo.get_by_name(category)
        if found is None:
            raise EntityNotFoundError(f"Category not found: '{category}'")

        clothing_set = ClothingSet.create(
            name=name,
            category=found.name,
            quantity=quantity,
            price_per_day=Money.of(price_per_day, self._currency),
            description=description,
            image_url=image_url,
        )
        self._clothing_set_repo.save(clothing_set)
        return clothing_set
