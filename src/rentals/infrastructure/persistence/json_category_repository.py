"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rentals.domain.model.category import Category
from rentals.domain.repository.category_repository import CategoryRepository
from rentals.infrastructure.persistence.json_file import JsonRecordFile


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: int) -> Category | None:
        for raw in self._file.load():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Category | None:
        for category in self.list_all():
            if category.matches(name):
                return category
        return None

    def list_all(self, include_inactive: bool = False) -> list[Category]:
        categories = [self._to_domain(raw) for raw in self._file.load()]
        if include_inactive:
            return categories
        return [c for c in categories if c.is_active]

    def save(self, category: Category) -> None:
        with self._file.locked():
            records = self._file.load()
            if category.id is None:
                category.id = self._file.next_id(records)
            self._file.upsert(records, self._to_raw(category))
            self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "is_active": category.is_active,
            "created_at": category.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
