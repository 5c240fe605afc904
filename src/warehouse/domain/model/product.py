"""Product aggregate.

A product is a named item with an expiry date. Products are not linked
to categories.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Product:
    """A product held in the warehouse.

    ``id`` stays ``None`` until the repository assigns one on create.
    """

    name: str
    expiry_date: date
    id: int | None = None

    def revise(self, name: str, expiry_date: date) -> None:
        """Overwrite the mutable fields in place."""
        self.name = name
        self.expiry_date = expiry_date
