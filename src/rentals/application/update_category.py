"""Application service: Update Category use case.

Clothing sets refer to their category by name, so a rename is refused
while any active set still carries the old name.
"""

from __future__ import annotations

from rentals.domain.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ValidationError,
)
from rentals.domain.model.category import Category
from rentals.domain.repository.category_repository import CategoryRepository
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository


class UpdateCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        clothing_set_repo: ClothingSetRepository,
    ) -> None:
        self._category_repo = category_repo
        self._clothing_set_repo = clothing_set_repo

    def handle(
        self,
        category_id: int,
        name: str | None = None,
        description: str | None = None,
    ) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None or not category.is_active:
            raise EntityNotFoundError(f"Category #{category_id} not found")

        if name is not None and not category.matches(name):
            if any(
                other.matches(name)
                for other in self._category_repo.list_all(include_inactive=True)
                if other.id != category.id
            ):
                raise ValidationError(f"Category '{name.strip()}' already exists")
            in_use = self._clothing_set_repo.list_by_category(category.name)
            if in_use:
                raise BusinessRuleViolation(
                    f"Cannot rename category '{category.name}' while "
                    f"{len(in_use)} clothing set(s) use it"
                )
            category.rename(name)

        if description is not None:
            category.describe(description)

        self._category_repo.save(category)
        return category
