"""Category aggregate.

Categories group clothing sets for browsing. Clothing sets reference a
category by *name*, not by id, so renaming or removing a category has to be
guarded by the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rentals.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 80

DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Đầm dạ hội", "Váy đầm sang trọng cho các sự kiện đặc biệt"),
    ("Vest nam", "Bộ vest lịch lãm cho nam giới"),
    ("Áo cưới", "Trang phục cưới hỏi truyền thống và hiện đại"),
    ("Trang phục truyền thống", "Các loại trang phục truyền thống Việt Nam"),
    ("Áo dài", "Áo dài truyền thống Việt Nam"),
    ("Suit nữ", "Bộ suit công sở cho nữ"),
)


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Category name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Category name must be at most {MAX_NAME_LENGTH} characters"
        )
    return name


@dataclass
class Category:

    id: int | None
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        return Category(
            id=None,
            name=_clean_name(name),
            description=(description or "").strip() or None,
        )

    def rename(self, new_name: str) -> None:
        self.name = _clean_name(new_name)

    def describe(self, description: str | None) -> None:
        self.description = (description or "").strip() or None

    def deactivate(self) -> None:
        """Soft delete. Callers must check no active set still uses the name."""
        if not self.is_active:
            raise ValidationError(f"Category '{self.name}' is already deleted")
        self.is_active = False

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()
