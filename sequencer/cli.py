"""Command line entry point: run the API server or apply migrations."""

from pathlib import Path

import click
import structlog
import uvicorn
from alembic import command
from alembic.config import Config

from sequencer.config import get_settings
from sequencer.logging import setup_logging

logger = structlog.get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def alembic_config() -> Config:
    """Alembic configuration for the migrations shipped inside the package."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return config


@click.group()
def cli() -> None:
    """Element Sequencer service commands."""
    setup_logging(get_settings())


@cli.command()
@click.option("--host", default=None, help="Bind address (default: HOST setting).")
@click.option("--port", default=None, type=int, help="Bind port (default: PORT setting).")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "sequencer.main:build_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,  # keep the structlog handler installed by setup_logging
    )


@cli.command()
@click.option("--revert", is_flag=True, help="Roll back the most recent migration.")
def migrate(revert: bool) -> None:
    """Apply pending migrations, or revert the last one."""
    config = alembic_config()
    if revert:
        logger.info("Reverting last migration")
        command.downgrade(config, "-1")
    else:
        logger.info("Applying migrations")
        command.upgrade(config, "head")
