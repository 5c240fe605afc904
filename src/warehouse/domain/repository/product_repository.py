"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The text-file implementation lives in
``warehouse.infrastructure.persistence``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load(self) -> None:
        """Replace the in-memory products with the stored ones."""

    @abstractmethod
    def save(self) -> None:
        """Write every in-memory product to storage."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Assign an id to a new product, store it and return it."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def update(self, product: Product) -> Product | None:
        """Overwrite name and expiry date of the product with the same id.

        Returns the stored product, or None (and changes nothing) when
        no product has that id.
        """

    @abstractmethod
    def delete(self, product_id: int) -> int:
        """Remove every product with this id and save. Returns the count."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in storage order."""
