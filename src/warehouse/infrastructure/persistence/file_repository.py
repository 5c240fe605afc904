"""Text-file-backed implementations of ProductRepository and UserRepository.

Both keep the full collection in memory, loaded once, and flush the
whole list through a FileStore after every mutation. A mutation whose
flush fails is undone, so memory never holds what the file does not.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generic, Protocol, TypeVar

from warehouse.domain.exceptions import StorageError
from warehouse.domain.model.product import Product
from warehouse.domain.model.user import User
from warehouse.domain.repository.product_repository import ProductRepository
from warehouse.domain.repository.user_repository import UserRepository
from warehouse.infrastructure.persistence.codec import ProductCodec, UserCodec
from warehouse.infrastructure.persistence.file_store import FileStore
from warehouse.infrastructure.persistence.id_sequence import IdSequence


class _Identified(Protocol):
    id: int | None


R = TypeVar("R", bound=_Identified)


class FileBackedRepository(Generic[R]):

    def __init__(self, store: FileStore[R], sequence: IdSequence) -> None:
        self._store = store
        self._sequence = sequence
        self._records: list[R] = []

    def load(self) -> None:
        self._records = self._store.load()

    def save(self) -> None:
        self._store.save(self._records)

    def create(self, record: R) -> R:
        record.id = self._sequence.next_id(floor=self._highest_id())
        self._records.append(record)
        try:
            self.save()
        except StorageError:
            self._records.pop()
            record.id = None
            raise
        return record

    def list_all(self) -> list[R]:
        return list(self._records)

    def _highest_id(self) -> int:
        return max((r.id for r in self._records if r.id is not None), default=0)


class TextProductRepository(FileBackedRepository[Product], ProductRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(FileStore(file_path, ProductCodec()), IdSequence.beside(file_path))

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._records:
            if product.id == product_id:
                return product
        return None

    def update(self, product: Product) -> Product | None:
        existing = self.get_by_id(product.id)
        if existing is None:
            return None
        previous = (existing.name, existing.expiry_date)
        existing.revise(product.name, product.expiry_date)
        try:
            self.save()
        except StorageError:
            existing.revise(*previous)
            raise
        return existing

    def delete(self, product_id: int) -> int:
        before = self._records
        self._records = [p for p in before if p.id != product_id]
        try:
            self.save()
        except StorageError:
            self._records = before
            raise
        return len(before) - len(self._records)


class TextUserRepository(FileBackedRepository[User], UserRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(FileStore(file_path, UserCodec()), IdSequence.beside(file_path))
