"""JSON-file-backed implementation of ClothingSetRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rentals.domain.model.clothing_set import ClothingSet
from rentals.domain.model.value_objects import DEFAULT_CURRENCY, Money
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.infrastructure.persistence.json_file import JsonRecordFile


class JsonClothingSetRepository(ClothingSetRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- ClothingSetRepository interface --------------------------------------

    def get_by_id(self, set_id: int) -> ClothingSet | None:
        for raw in self._file.load():
            if raw["id"] == set_id:
                return self._to_domain(raw)
        return None

    def list_all(self, include_inactive: bool = False) -> list[ClothingSet]:
        sets = [self._to_domain(raw) for raw in self._file.load()]
        if include_inactive:
            return sets
        return [s for s in sets if s.is_active]

    def list_by_category(self, category_name: str) -> list[ClothingSet]:
        wanted = category_name.strip().casefold()
        return [s for s in self.list_all() if s.category.casefold() == wanted]

    def save(self, clothing_set: ClothingSet) -> None:
        with self._file.locked():
            records = self._file.load()
            if clothing_set.id is None:
                clothing_set.id = self._file.next_id(records)
            self._file.upsert(records, self._to_raw(clothing_set))
            self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(clothing_set: ClothingSet) -> dict:
        return {
            "id": clothing_set.id,
            "name": clothing_set.name,
            "description": clothing_set.description,
            "category": clothing_set.category,
            "quantity": clothing_set.quantity,
            "price_per_day": str(clothing_set.price_per_day.amount),
            "currency": clothing_set.price_per_day.currency,
            "image_url": clothing_set.image_url,
            "is_active": clothing_set.is_active,
            "created_at": clothing_set.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ClothingSet:
        return ClothingSet(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
            category=raw["category"],
            quantity=raw["quantity"],
            price_per_day=Money(
                Decimal(raw["price_per_day"]), raw.get("currency", DEFAULT_CURRENCY)
            ),
            image_url=raw.get("image_url"),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
