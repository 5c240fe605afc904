"""Abstract repository for categories (memory only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def create(self, category: Category) -> Category:
        """Assign the next id and keep the category in memory."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category created so far."""
