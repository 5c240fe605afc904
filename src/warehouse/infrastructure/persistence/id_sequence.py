"""Persisted high-water mark for record ids.

Deriving ids from the size of the collection hands out the same id
again after a delete. The sequence file remembers the last id issued,
so an id is never reused, even across restarts.
"""

from __future__ import annotations

import logging
from pathlib import Path

from warehouse.domain.exceptions import StorageError, ValidationError
from warehouse.domain.model.fields import parse_record_id
from warehouse.infrastructure.persistence.file_store import atomic_write_text

logger = logging.getLogger(__name__)


class IdSequence:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @classmethod
    def beside(cls, data_path: Path) -> IdSequence:
        """The sequence kept next to a data file (``<name>.seq``)."""
        return cls(data_path.with_name(data_path.name + ".seq"))

    @property
    def file_path(self) -> Path:
        return self._file_path

    def last_issued(self) -> int:
        """Last id handed out, or 0 when nothing was issued yet.

        An unreadable value counts as 0; the caller's floor then keeps
        ids above everything already stored.
        """
        if not self._file_path.exists():
            return 0
        try:
            text = self._file_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        try:
            return parse_record_id(text)
        except ValidationError:
            logger.warning("Ignoring corrupt id sequence in %s", self._file_path)
            return 0

    def next_id(self, floor: int = 0) -> int:
        """Issue an id greater than both the last issued one and ``floor``."""
        value = max(self.last_issued(), floor) + 1
        atomic_write_text(self._file_path, f"{value}\n")
        return value
