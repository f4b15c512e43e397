"""Application service: Update Clothing Set use case."""

from __future__ import annotations

from rentals.domain.exceptions import EntityNotFoundError
from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.value_objects import Money
from rentals.domain.repository.category_repository import CategoryRepository
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository


class UpdateClothingSetHandler:

    def __init__(
        self,
        clothing_set_repo: ClothingSetRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._clothing_set_repo = clothing_set_repo
        self._category_repo = category_repo

    def handle(
        self,
        set_id: int,
        name: str | None = None,
        category: str | None = None,
        quantity: int | None = None,
        price_per_day: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> ClothingSet:
        """Apply whichever fields are given; the rest stay as they are.

        A new price only affects future orders; existing ones captured
        a price snapshot at admission time.
        """
        clothing_set = self._clothing_set_repo.get_by_id(set_id)
        if clothing_set is None or not clothing_set.is_active:
            raise EntityNotFoundError(f"Clothing set #{set_id} not found")

        if name is not None:
            clothing_set.rename(name)
        if category is not None:
            found = self._category_repo.get_by_name(category)
            if found is None:
                raise EntityNotFoundError(f"Category not found: '{category}'")
            clothing_set.recategorise(found.name)
        if quantity is not None:
            clothing_set.set_quantity(quantity)
        if price_per_day is not None:
            clothing_set.update_price(
                Money.of(price_per_day, clothing_set.price_per_day.currency)
            )
        clothing_set.update_details(description=description, image_url=image_url)

        self._clothing_set_repo.save(clothing_set)
        return clothing_set
