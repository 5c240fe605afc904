"""Tests for settings resolution."""

from pathlib import Path

import pytest

from warehouse.infrastructure.config import get_settings

_VARS = (
    "WAREHOUSE_DATA_DIR",
    "WAREHOUSE_PRODUCTS_FILE",
    "WAREHOUSE_USERS_FILE",
    "WAREHOUSE_LOG_LEVEL",
    "WAREHOUSE_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.products_file == Path("data") / "products.txt"
        assert settings.users_file == Path("data") / "users.txt"
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_data_dir_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WAREHOUSE_DATA_DIR", str(tmp_path))
        settings = get_settings()
        assert settings.products_file == tmp_path / "products.txt"
        assert settings.users_file == tmp_path / "users.txt"

    def test_file_variables_override_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WAREHOUSE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("WAREHOUSE_PRODUCTS_FILE", str(tmp_path / "p.csv"))
        monkeypatch.setenv("WAREHOUSE_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.products_file == tmp_path / "p.csv"
        assert settings.users_file == tmp_path / "users.txt"
        assert settings.log_level == "DEBUG"

    def test_arguments_override_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WAREHOUSE_DATA_DIR", "/nowhere")
        settings = get_settings(data_dir=tmp_path, log_file=tmp_path / "w.log")
        assert settings.products_file == tmp_path / "products.txt"
        assert settings.log_file == tmp_path / "w.log"
