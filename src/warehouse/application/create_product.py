"""Application service: Create Product use case."""

from __future__ import annotations

from warehouse.application.dto import ProductDTO
from warehouse.domain.model.fields import clean_name, parse_date
from warehouse.domain.model.product import Product
from warehouse.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, expiry_date: str) -> ProductDTO:
        """Validate the raw input and add a new product.

        Both fields are checked before the repository is touched, so a
        bad date never leaves a half-created product behind.
        """
        product = Product(
            name=clean_name(name, "Product"),
            expiry_date=parse_date(expiry_date.strip()),
        )
        self._product_repo.create(product)
        return ProductDTO.from_product(product)
