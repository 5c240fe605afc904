"""Composition root: wires concrete implementations to domain interfaces.

This is the only place that knows about every layer. Repositories are
built and loaded once here and handed to the shell; nothing else holds
them.
"""

from __future__ import annotations

import logging

from warehouse.infrastructure.cli.shell import InteractiveShell
from warehouse.infrastructure.config import Settings
from warehouse.infrastructure.persistence.file_repository import (
    TextProductRepository,
    TextUserRepository,
)
from warehouse.infrastructure.persistence.memory_category_repository import (
    InMemoryCategoryRepository,
)

logger = logging.getLogger(__name__)


def product_repository(settings: Settings) -> TextProductRepository:
    repo = TextProductRepository(settings.products_file)
    repo.load()
    return repo


def user_repository(settings: Settings) -> TextUserRepository:
    repo = TextUserRepository(settings.users_file)
    repo.load()
    return repo


def build_shell(settings: Settings) -> InteractiveShell:
    """Load both stores and return a shell bound to them.

    Categories start empty on every run; they are never persisted.
    """
    logger.info(
        "Using products file %s and users file %s",
        settings.products_file, settings.users_file,
    )
    return InteractiveShell(
        product_repo=product_repository(settings),
        user_repo=user_repository(settings),
        category_repo=InMemoryCategoryRepository(),
    )
