"""Category registry with the built-in defaults."""

from __future__ import annotations

from typing import Iterator, Optional

from weekly_planner.schema import Category

DEFAULT_CATEGORIES = (
    Category("work", "Work", "#3B82F6"),
    Category("personal", "Personal", "#10B981"),
    Category("health", "Health", "#F59E0B"),
    Category("study", "Study", "#8B5CF6"),
    Category("leisure", "Leisure", "#EF4444"),
    Category("meeting", "Meeting", "#F97316"),
    Category("exercise", "Exercise", "#06B6D4"),
)


class CategoryRegistry:
    """Insertion-ordered mapping from category key to display metadata.

    Registering an existing key replaces its name and color in place. Removal
    is not supported because activities reference categories by key.
    """

    def __init__(self, defaults: bool = True):
        self._by_key: dict[str, Category] = {}
        if defaults:
            for category in DEFAULT_CATEGORIES:
                self._by_key[category.key] = category

    def register(self, key: str, name: str, color: str) -> Category:
        key = (key or "").strip()
        name = (name or "").strip()
        if not key:
            raise ValueError("Category key cannot be empty")
        if not name:
            raise ValueError(f"Category '{key}' needs a display name")

        category = Category(key=key, name=name, color=(color or "").strip())
        self._by_key[key] = category
        return category

    def get(self, key: str) -> Optional[Category]:
        return self._by_key.get(key)

    def contains(self, key: str) -> bool:
        return key in self._by_key

    def list(self) -> list[Category]:
        return list(self._by_key.values())

    def display_name(self, key: str) -> str:
        category = self._by_key.get(key)
        return category.name if category else key

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[Category]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._by_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryRegistry):
            return NotImplemented
        return self.list() == other.list()
