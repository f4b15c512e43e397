"""Abstract repository for ClothingSet aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rentals.domain.model.clothing_set import ClothingSet


class ClothingSetRepository(ABC):

    @abstractmethod
    def get_by_id(self, set_id: int) -> ClothingSet | None:
        """Return a clothing set by its ID (active or not), or None."""

    @abstractmethod
    def list_all(self, include_inactive: bool = False) -> list[ClothingSet]:
        """Return clothing sets, active ones only unless asked otherwise."""

    @abstractmethod
    def list_by_category(self, category_name: str) -> list[ClothingSet]:
        """Return the active clothing sets filed under a category name."""

    @abstractmethod
    def save(self, clothing_set: ClothingSet) -> None:
        """Persist a new or updated clothing set, assigning an ID if needed."""
