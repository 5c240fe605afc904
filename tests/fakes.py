"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the text-file
repositories but keep everything in a list. No file I/O.
"""

from __future__ import annotations

from warehouse.domain.model.product import Product
from warehouse.domain.model.user import User
from warehouse.domain.repository.product_repository import ProductRepository
from warehouse.domain.repository.user_repository import UserRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: list[Product] = list(products or [])
        self._next_id = max((p.id for p in self._store), default=0) + 1
        self.save_count = 0

    def load(self) -> None:
        pass

    def save(self) -> None:
        self.save_count += 1

    def create(self, product: Product) -> Product:
        product.id = self._next_id
        self._next_id += 1
        self._store.append(product)
        self.save()
        return product

    def get_by_id(self, product_id: int) -> Product | None:
        for p in self._store:
            if p.id == product_id:
                return p
        return None

    def update(self, product: Product) -> Product | None:
        existing = self.get_by_id(product.id)
        if existing is None:
            return None
        existing.revise(product.name, product.expiry_date)
        self.save()
        return existing

    def delete(self, product_id: int) -> int:
        before = len(self._store)
        self._store = [p for p in self._store if p.id != product_id]
        self.save()
        return before - len(self._store)

    def list_all(self) -> list[Product]:
        return list(self._store)


class FakeUserRepository(UserRepository):

    def __init__(self) -> None:
        self._store: list[User] = []

    def load(self) -> None:
        pass

    def save(self) -> None:
        pass

    def create(self, user: User) -> User:
        user.id = len(self._store) + 1
        self._store.append(user)
        return user

    def list_all(self) -> list[User]:
        return list(self._store)
