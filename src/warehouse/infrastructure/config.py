"""Runtime configuration.

Paths and logging options come from ``WAREHOUSE_*`` environment
variables. The click options bind the same variables, so CLI runs
resolve them there; ``get_settings`` reads them for every other caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Typed view of the environment."""

    products_file: Path
    users_file: Path
    log_level: str
    log_file: Path | None


def get_settings(
    data_dir: Path | None = None,
    products_file: Path | None = None,
    users_file: Path | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
) -> Settings:
    """Build Settings from the environment; explicit arguments win."""

    def _path(value: str | None) -> Path | None:
        return Path(value).expanduser() if value else None

    base = data_dir or _path(os.getenv("WAREHOUSE_DATA_DIR")) or DEFAULT_DATA_DIR
    return Settings(
        products_file=(
            products_file
            or _path(os.getenv("WAREHOUSE_PRODUCTS_FILE"))
            or base / "products.txt"
        ),
        users_file=(
            users_file
            or _path(os.getenv("WAREHOUSE_USERS_FILE"))
            or base / "users.txt"
        ),
        log_level=(log_level or os.getenv("WAREHOUSE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        log_file=log_file or _path(os.getenv("WAREHOUSE_LOG_FILE")),
    )
