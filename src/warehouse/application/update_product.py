"""Application service: Update Product use case."""

from __future__ import annotations

from warehouse.application.dto import ProductDTO
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.fields import clean_name, parse_date, parse_record_id
from warehouse.domain.model.product import Product
from warehouse.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, name: str, expiry_date: str) -> ProductDTO:
        """Replace a product's name and expiry date.

        The repository ignores updates for unknown ids; here that miss
        is reported as EntityNotFoundError.
        """
        candidate = Product(
            id=parse_record_id(product_id.strip()),
            name=clean_name(name, "Product"),
            expiry_date=parse_date(expiry_date.strip()),
        )
        updated = self._product_repo.update(candidate)
        if updated is None:
            raise EntityNotFoundError(f"Product with ID {candidate.id} not found")
        return ProductDTO.from_product(updated)
