"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from rentals.infrastructure.config import Settings
from rentals.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from rentals.infrastructure.persistence.json_clothing_set_repository import (
    JsonClothingSetRepository,
)
from rentals.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def category_repository(settings: Settings) -> JsonCategoryRepository:
    return JsonCategoryRepository(settings.data_dir / "categories.json")


def clothing_set_repository(settings: Settings) -> JsonClothingSetRepository:
    return JsonClothingSetRepository(settings.data_dir / "clothing_sets.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")
