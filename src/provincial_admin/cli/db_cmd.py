"""Database migration CLI commands using Alembic programmatically."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer()

_ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to alembic.ini")]


def _alembic_config(path: Path) -> Config:
    """Load the Alembic config, failing with a CLI error if it is missing."""
    from alembic.config import Config

    if not path.is_file():
        typer.echo(f"Alembic config not found: {path}", err=True)
        raise typer.Exit(code=1)
    return Config(str(path))


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    config_path: _ConfigOption = Path("alembic.ini"),
) -> None:
    """Run database migrations up to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(config, revision)
    logger.info("Database upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: _ConfigOption = Path("alembic.ini"),
) -> None:
    """Roll back database migrations to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Downgrading database to {revision}")
    command.downgrade(config, revision)
    logger.info("Database downgrade complete")


@db_app.command()
def current(config_path: _ConfigOption = Path("alembic.ini")) -> None:
    """Show the current database migration revision."""
    from alembic import command

    command.current(_alembic_config(config_path), verbose=True)


@db_app.command()
def history(config_path: _ConfigOption = Path("alembic.ini")) -> None:
    """List all migration revisions."""
    from alembic import command

    command.history(_alembic_config(config_path))
