"""Application service: Read Product use case (query)."""

from __future__ import annotations

from warehouse.application.dto import ProductDTO
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.fields import parse_record_id
from warehouse.domain.repository.product_repository import ProductRepository


class ReadProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        pid = parse_record_id(product_id.strip())
        product = self._product_repo.get_by_id(pid)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {pid} not found")
        return ProductDTO.from_product(product)
