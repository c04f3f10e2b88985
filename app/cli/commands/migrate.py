"""
Database migration commands.
"""
from pathlib import Path
from typing import Annotated

import typer
from alembic import command
from alembic.config import Config
from rich.console import Console

from app.cli.logging import setup_cli_logging
from app.core.config import settings

app = typer.Typer(help="Database migrations")
console = Console()


def _resolve_alembic_ini() -> Path:
    alembic_ini = Path("alembic.ini")
    if alembic_ini.exists():
        return alembic_ini
    backend_dir = Path(__file__).parent.parent.parent.parent
    return backend_dir / "alembic.ini"


def _alembic_config() -> Config:
    alembic_ini = _resolve_alembic_ini()
    if not alembic_ini.exists():
        console.print("[red]Alembic config (alembic.ini) not found[/red]")
        raise typer.Exit(code=2)
    config = Config(str(alembic_ini))
    config.set_main_option("sqlalchemy.url", settings.database_url)
    return config


@app.command("upgrade")
def upgrade(
    revision: Annotated[str, typer.Argument(help="Target revision")] = "head",
):
    """Apply migrations up to ``revision``."""
    logger = setup_cli_logging("migrate")
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(_alembic_config(), revision)
    console.print(f"[green]Database upgraded to {revision}[/green]")


@app.command("current")
def current():
    """Show the current database revision."""
    command.current(_alembic_config())
