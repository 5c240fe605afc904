"""Generic flat-file store: an ordered list of records in a text file.

Every save is a full snapshot. The snapshot goes to a temporary file in
the target's directory first and is then renamed over the target, so
the file on disk is always either the old or the new snapshot.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Generic, TypeVar

from warehouse.domain.exceptions import StorageError
from warehouse.infrastructure.persistence.codec import RecordCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def atomic_write_text(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` (UTF-8) via temp file and rename."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise StorageError(f"Cannot write {path}: {exc}") from exc
    except BaseException:
        _discard(tmp_name)
        raise


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass


class FileStore(Generic[T]):

    def __init__(self, file_path: Path, codec: RecordCodec[T]) -> None:
        self._file_path = file_path
        self._codec = codec

    def load(self) -> list[T]:
        """Read every decodable record; a missing file is an empty store."""
        if not self._file_path.exists():
            logger.debug("%s does not exist, starting empty", self._file_path)
            return []

        try:
            with self._file_path.open(encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

        records: list[T] = []
        skipped = 0
        for number, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            record = self._codec.decode(line)
            if record is None:
                skipped += 1
                logger.debug("Skipping malformed line %d in %s", number, self._file_path)
                continue
            records.append(record)

        if skipped:
            logger.info(
                "Loaded %d records from %s, skipped %d malformed lines",
                len(records), self._file_path, skipped,
            )
        else:
            logger.debug("Loaded %d records from %s", len(records), self._file_path)
        return records

    def save(self, records: list[T]) -> None:
        """Overwrite the file with one encoded line per record."""
        text = "".join(self._codec.encode(r) + "\n" for r in records)
        atomic_write_text(self._file_path, text)
        logger.debug("Saved %d records to %s", len(records), self._file_path)
