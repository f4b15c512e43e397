"""Application service: Delete Category use case.

Deletion is a soft delete, and it is refused while any active clothing set
is still filed under the category's name. Storage does not enforce this
reference, so this handler is the only guard.
"""

from __future__ import annotations

import logging

from rentals.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from rentals.domain.repository.category_repository import CategoryRepository
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository

logger = logging.getLogger(__name__)


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        clothing_set_repo: ClothingSetRepository,
    ) -> None:
        self._category_repo = category_repo
        self._clothing_set_repo = clothing_set_repo

    def handle(self, category_id: int) -> None:
        category = self._category_repo.get_by_id(category_id)
        if category is None or not category.is_active:
            raise EntityNotFoundError(f"Category #{category_id} not found")

        in_use = self._clothing_set_repo.list_by_category(category.name)
        if in_use:
            names = ", ".join(s.name for s in in_use)
            raise BusinessRuleViolation(
                f"Cannot delete category '{category.name}': "
                f"still used by clothing set(s) {names}"
            )

        category.deactivate()
        self._category_repo.save(category)
        logger.info("Deleted category '%s' (#%s)", category.name, category.id)
