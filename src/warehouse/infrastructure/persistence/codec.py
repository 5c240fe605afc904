"""Line codecs: one record <-> one line of comma-delimited text.

Fields are written with CSV minimal quoting, so plain values come out
bare (``1,Milk,2025-06-01``) while a name holding a comma or a quote is
wrapped in quotes and survives the next read.
"""

from __future__ import annotations

import csv
import io
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from warehouse.domain.exceptions import ValidationError
from warehouse.domain.model.fields import format_date, parse_date, parse_record_id
from warehouse.domain.model.product import Product
from warehouse.domain.model.user import User

T = TypeVar("T")


class RecordCodec(ABC, Generic[T]):
    """Translate a record to and from a single line of text.

    ``decode`` returns None for any line it cannot parse; callers skip
    such lines instead of failing the whole batch.
    """

    field_count: int

    def encode(self, record: T) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="")
        writer.writerow(self._to_fields(record))
        return buffer.getvalue()

    def decode(self, line: str) -> T | None:
        try:
            rows = list(csv.reader([line], strict=True))
        except csv.Error:
            return None
        if len(rows) != 1 or len(rows[0]) != self.field_count:
            return None
        try:
            return self._from_fields(rows[0])
        except ValidationError:
            return None

    @abstractmethod
    def _to_fields(self, record: T) -> list[str]:
        """Return the record's fields in storage order."""

    @abstractmethod
    def _from_fields(self, fields: list[str]) -> T:
        """Build a record, raising ValidationError on a bad field."""


class ProductCodec(RecordCodec[Product]):
    """``id,name,YYYY-MM-DD``"""

    field_count = 3

    def _to_fields(self, record: Product) -> list[str]:
        return [str(record.id), record.name, format_date(record.expiry_date)]

    def _from_fields(self, fields: list[str]) -> Product:
        raw_id, name, raw_date = fields
        return Product(
            id=parse_record_id(raw_id),
            name=name,
            expiry_date=parse_date(raw_date),
        )


class UserCodec(RecordCodec[User]):
    """``id,name``"""

    field_count = 2

    def _to_fields(self, record: User) -> list[str]:
        return [str(record.id), record.name]

    def _from_fields(self, fields: list[str]) -> User:
        raw_id, name = fields
        return User(id=parse_record_id(raw_id), name=name)
