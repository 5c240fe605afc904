"""Application service: Create User use case."""

from __future__ import annotations

from warehouse.application.dto import UserDTO
from warehouse.domain.model.fields import clean_name
from warehouse.domain.model.user import User
from warehouse.domain.repository.user_repository import UserRepository


class CreateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, name: str) -> UserDTO:
        user = self._user_repo.create(User(name=clean_name(name, "User")))
        return UserDTO.from_user(user)
