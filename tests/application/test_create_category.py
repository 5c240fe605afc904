"""Tests for the CreateCategory use case."""

import pytest

from warehouse.application.create_category import CreateCategoryHandler
from warehouse.application.dto import CategoryDTO
from warehouse.domain.exceptions import ValidationError
from warehouse.infrastructure.persistence.memory_category_repository import (
    InMemoryCategoryRepository,
)


class TestCreateCategory:

    def test_assigns_sequential_ids(self):
        handler = CreateCategoryHandler(InMemoryCategoryRepository())
        assert handler.handle(" Dairy ") == CategoryDTO(id=1, name="Dairy")
        assert handler.handle("Bakery") == CategoryDTO(id=2, name="Bakery")

    def test_blank_name_rejected(self):
        repo = InMemoryCategoryRepository()
        with pytest.raises(ValidationError, match="Category name is required"):
            CreateCategoryHandler(repo).handle("")
        assert repo.list_all() == []
