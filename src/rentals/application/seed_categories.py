"""Application service: Seed default categories."""

from __future__ import annotations

from rentals.domain.model.category import DEFAULT_CATEGORIES, Category
from rentals.domain.repository.category_repository import CategoryRepository


class SeedCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[Category]:
        """Add whichever default categories are missing; return the ones added."""
        existing = self._category_repo.list_all(include_inactive=True)
        added: list[Category] = []
        for name, description in DEFAULT_CATEGORIES:
            if any(c.matches(name) for c in existing):
                continue
            category = Category.create(name, description)
            self._category_repo.save(category)
            added.append(category)
        return added
