"""Interactive menu loop over the product, user and category use cases."""

from __future__ import annotations

import logging
from typing import Callable

import click

from warehouse.application.create_category import CreateCategoryHandler
from warehouse.application.create_product import CreateProductHandler
from warehouse.application.create_user import CreateUserHandler
from warehouse.application.delete_product import DeleteProductHandler
from warehouse.application.read_product import ReadProductHandler
from warehouse.application.update_product import UpdateProductHandler
from warehouse.domain.exceptions import DomainException, StorageError
from warehouse.domain.model.fields import DATE_FORMAT_HINT
from warehouse.domain.repository.category_repository import CategoryRepository
from warehouse.domain.repository.product_repository import ProductRepository
from warehouse.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

MENU = (
    "Choose an option:",
    "1. Create Product",
    "2. Read Product",
    "3. Update Product",
    "4. Delete Product",
    "5. Create User",
    "6. Create Category",
    "0. Exit",
)

EXIT_CHOICE = "0"


def _ask(text: str) -> str:
    """Read one line; an empty answer is returned as ''."""
    return click.prompt(text, default="", show_default=False)


class InteractiveShell:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._create_product = CreateProductHandler(product_repo)
        self._read_product = ReadProductHandler(product_repo)
        self._update_product = UpdateProductHandler(product_repo)
        self._delete_product = DeleteProductHandler(product_repo)
        self._create_user = CreateUserHandler(user_repo)
        self._create_category = CreateCategoryHandler(category_repo)
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.create_product,
            "2": self.read_product,
            "3": self.update_product,
            "4": self.delete_product,
            "5": self.create_user,
            "6": self.create_category,
        }

    def run(self) -> None:
        """Serve menu choices until '0' or end of input."""
        while True:
            for line in MENU:
                click.echo(line)
            try:
                choice = _ask("Option").strip()
                if choice == EXIT_CHOICE:
                    return
                action = self._actions.get(choice)
                if action is None:
                    click.echo("Invalid choice. Please enter a valid option.")
                    continue
                self._dispatch(action)
            except click.Abort:
                click.echo()
                return

    def _dispatch(self, action: Callable[[], None]) -> None:
        try:
            action()
        except StorageError as exc:
            logger.exception("Storage failure")
            click.echo(f"Error: {exc}")
        except DomainException as exc:
            click.echo(f"Error: {exc}")

    # --- Menu actions -----------------------------------------------------------

    def create_product(self) -> None:
        name = _ask("Enter product name")
        expiry = _ask(f"Enter expiry date ({DATE_FORMAT_HINT})")
        product = self._create_product.handle(name=name, expiry_date=expiry)
        click.echo(
            f"Product #{product.id} '{product.name}' created "
            f"(expires {product.expiry_date})."
        )

    def read_product(self) -> None:
        product = self._read_product.handle(_ask("Enter product ID"))
        click.echo(
            f"Retrieved Product #{product.id}: {product.name}, "
            f"Expiry Date: {product.expiry_date}"
        )

    def update_product(self) -> None:
        # Confirm the product exists before asking for the new values.
        current = self._read_product.handle(_ask("Enter product ID to update"))
        name = _ask("Enter updated product name")
        expiry = _ask(f"Enter updated expiry date ({DATE_FORMAT_HINT})")
        product = self._update_product.handle(
            product_id=str(current.id), name=name, expiry_date=expiry
        )
        click.echo(
            f"Product #{product.id} updated: {product.name}, "
            f"Expiry Date: {product.expiry_date}"
        )

    def delete_product(self) -> None:
        result = self._delete_product.handle(_ask("Enter product ID to delete"))
        if result.removed:
            click.echo(f"Product #{result.product_id} deleted.")
        else:
            click.echo(f"No product with ID {result.product_id}; nothing deleted.")

    def create_user(self) -> None:
        user = self._create_user.handle(_ask("Enter user name"))
        click.echo(f"User #{user.id} '{user.name}' created.")

    def create_category(self) -> None:
        category = self._create_category.handle(_ask("Enter category name"))
        click.echo(f"Category #{category.id} '{category.name}' created.")
