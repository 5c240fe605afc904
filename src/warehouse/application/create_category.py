"""Application service: Create Category use case.

Categories are kept for the lifetime of the process only.
"""

from __future__ import annotations

from warehouse.application.dto import CategoryDTO
from warehouse.domain.model.category import Category
from warehouse.domain.model.fields import clean_name
from warehouse.domain.repository.category_repository import CategoryRepository


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> CategoryDTO:
        category = self._category_repo.create(Category(name=clean_name(name, "Category")))
        return CategoryDTO.from_category(category)
