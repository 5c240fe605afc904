"""Application service: Delete Product use case."""

from __future__ import annotations

from warehouse.application.dto import DeletionDTO
from warehouse.domain.model.fields import parse_record_id
from warehouse.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> DeletionDTO:
        """Delete by id and report how many products were removed.

        The store is rewritten even when nothing matched.
        """
        pid = parse_record_id(product_id.strip())
        return DeletionDTO(product_id=pid, removed=self._product_repo.delete(pid))
