"""Tests for the generic FileStore."""

import os
from datetime import date

import pytest

from warehouse.domain.exceptions import StorageError
from warehouse.domain.model.product import Product
from warehouse.infrastructure.persistence.codec import ProductCodec
from warehouse.infrastructure.persistence.file_store import FileStore, atomic_write_text


@pytest.fixture
def path(tmp_path):
    return tmp_path / "products.txt"


@pytest.fixture
def store(path):
    return FileStore(path, ProductCodec())


class TestLoad:

    def test_missing_file_is_empty(self, store, path):
        assert store.load() == []
        assert not path.exists()

    def test_skips_blank_and_malformed_lines(self, store, path):
        path.write_text(
            "1,Milk,2025-06-01\n"
            "\n"
            "   \n"
            "garbage\n"
            "2,Bread,not-a-date\n"
            "3,Eggs,2025-05-20\n",
            encoding="utf-8",
        )
        records = store.load()
        assert [p.id for p in records] == [1, 3]

    def test_tolerates_crlf_and_missing_final_newline(self, store, path):
        path.write_bytes(b"1,Milk,2025-06-01\r\n2,Bread,2025-05-10")
        assert [p.name for p in store.load()] == ["Milk", "Bread"]

    def test_unreadable_encoding_raises_storage_error(self, store, path):
        path.write_bytes(b"1,\xff\xfe,2025-06-01\n")
        with pytest.raises(StorageError, match="Cannot read"):
            store.load()


class TestSave:

    def test_writes_one_line_per_record(self, store, path):
        store.save([
            Product(id=1, name="Milk", expiry_date=date(2025, 6, 1)),
            Product(id=2, name="Bread", expiry_date=date(2025, 5, 10)),
        ])
        assert path.read_bytes() == b"1,Milk,2025-06-01\n2,Bread,2025-05-10\n"

    def test_empty_list_gives_empty_file(self, store, path):
        store.save([])
        assert path.read_bytes() == b""

    def test_creates_missing_directories(self, tmp_path):
        nested = tmp_path / "a" / "b" / "products.txt"
        FileStore(nested, ProductCodec()).save([])
        assert nested.exists()

    def test_load_then_save_is_byte_identical(self, store, path):
        original = b'1,Milk,2025-06-01\n2,"Salt, fine",2026-01-01\n3,"5"" pipe",2027-03-03\n'
        path.write_bytes(original)
        store.save(store.load())
        assert path.read_bytes() == original

    def test_leaves_no_temporary_files(self, store, path):
        store.save([Product(id=1, name="Milk", expiry_date=date(2025, 6, 1))])
        assert os.listdir(path.parent) == ["products.txt"]


class TestAtomicWrite:

    def test_failed_replace_keeps_old_content(self, path, monkeypatch):
        path.write_text("old\n", encoding="utf-8")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        with pytest.raises(StorageError, match="disk full"):
            atomic_write_text(path, "new\n")

        assert path.read_text(encoding="utf-8") == "old\n"
        assert os.listdir(path.parent) == ["products.txt"]
