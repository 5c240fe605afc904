"""Data Transfer Objects returned by the use-case handlers.

The shell prints these; it never sees the domain records themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.model.category import Category
from warehouse.domain.model.fields import format_date
from warehouse.domain.model.product import Product
from warehouse.domain.model.user import User


@dataclass(frozen=True)
class ProductDTO:

    id: int
    name: str
    expiry_date: str  # YYYY-MM-DD

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            expiry_date=format_date(product.expiry_date),
        )


@dataclass(frozen=True)
class UserDTO:

    id: int
    name: str

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(id=user.id, name=user.name)


@dataclass(frozen=True)
class CategoryDTO:

    id: int
    name: str

    @classmethod
    def from_category(cls, category: Category) -> CategoryDTO:
        return cls(id=category.id, name=category.name)


@dataclass(frozen=True)
class DeletionDTO:
    """Output: which product id was targeted and how many went away."""

    product_id: int
    removed: int
