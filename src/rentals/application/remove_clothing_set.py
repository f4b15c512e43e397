"""Application service: Remove Clothing Set use case.

Removal is a soft delete. Orders already booked for the set keep their
items; the set just stops being offered for new orders.
"""

from __future__ import annotations

import logging

from rentals.domain.exceptions import EntityNotFoundError
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository

logger = logging.getLogger(__name__)


class RemoveClothingSetHandler:

    def __init__(self, clothing_set_repo: ClothingSetRepository) -> None:
        self._clothing_set_repo = clothing_set_repo

    def handle(self, set_id: int) -> None:
        clothing_set = self._clothing_set_repo.get_by_id(set_id)
        if clothing_set is None or not clothing_set.is_active:
            raise EntityNotFoundError(f"Clothing set #{set_id} not found")

        clothing_set.deactivate()
        self._clothing_set_repo.save(clothing_set)
        logger.info("Removed clothing set '%s' (#%s)", clothing_set.name, set_id)
