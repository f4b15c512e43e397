"""Application service: Add Category use case."""

from __future__ import annotations

from rentals.domain.exceptions import ValidationError
from rentals.domain.model.category import Category
from rentals.domain.repository.category_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str | None = None) -> Category:
        """Add a new category. Names are unique, deleted ones included."""
        category = Category.create(name, description)

        taken = [
            c for c in self._category_repo.list_all(include_inactive=True)
            if c.matches(category.name)
        ]
        if taken:
            raise ValidationError(f"Category '{category.name}' already exists")

        self._category_repo.save(category)
        return category
