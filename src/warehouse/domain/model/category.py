"""Category entity.

Categories only live for the lifetime of the process. They are never
written to storage and no product refers to one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Category:

    name: str
    id: int | None = None
