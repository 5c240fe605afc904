from __future__ import annotations

from pathlib import Path

import click

from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import build_shell
from warehouse.infrastructure.config import get_settings
from warehouse.infrastructure.logging_config import setup_logging

_PATH = click.Path(dir_okay=False, path_type=Path)


@click.command()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="WAREHOUSE_DATA_DIR",
    show_envvar=True,
    help="Directory holding products.txt and users.txt.",
)
@click.option(
    "--products-file", type=_PATH, envvar="WAREHOUSE_PRODUCTS_FILE", show_envvar=True,
    help="Product store.",
)
@click.option(
    "--users-file", type=_PATH, envvar="WAREHOUSE_USERS_FILE", show_envvar=True,
    help="User store.",
)
@click.option(
    "--log-level", envvar="WAREHOUSE_LOG_LEVEL", show_envvar=True,
    help="Log level name (default WARNING).",
)
@click.option(
    "--log-file", type=_PATH, envvar="WAREHOUSE_LOG_FILE", show_envvar=True,
    help="Rotating log file.",
)
def cli(
    data_dir: Path | None,
    products_file: Path | None,
    users_file: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """Warehouse: interactive product and user tracker."""
    settings = get_settings(
        data_dir=data_dir,
        products_file=products_file,
        users_file=users_file,
        log_level=log_level,
        log_file=log_file,
    )

    try:
        setup_logging(settings.log_level, settings.log_file)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")
    except OSError as exc:
        raise click.ClickException(f"Cannot open log file: {exc}")

    try:
        shell = build_shell(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    shell.run()
