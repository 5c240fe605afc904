"""Abstract repository for users."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def load(self) -> None:
        """Replace the in-memory users with the stored ones."""

    @abstractmethod
    def save(self) -> None:
        """Write every in-memory user to storage."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Assign an id to a new user, store it and return it."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user in storage order."""
