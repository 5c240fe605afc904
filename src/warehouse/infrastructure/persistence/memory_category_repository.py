"""In-memory CategoryRepository. Nothing here touches the filesystem."""

from __future__ import annotations

from warehouse.domain.model.category import Category
from warehouse.domain.repository.category_repository import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):

    def __init__(self) -> None:
        self._categories: list[Category] = []

    def create(self, category: Category) -> Category:
        category.id = len(self._categories) + 1
        self._categories.append(category)
        return category

    def list_all(self) -> list[Category]:
        return list(self._categories)
