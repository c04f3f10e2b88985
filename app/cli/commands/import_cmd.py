"""
Import commands.
"""
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from sqlmodel import Session

from app.cli.commands.utils import resolve_user
from app.cli.logging import setup_cli_logging
from app.core.database import engine
from app.data_transfer import ImportInputError
from app.services.import_service import ImportService

app = typer.Typer(help="Import journals from export files")
console = Console()


@app.command("run")
def run_import(
    file_path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True, help="ZIP or JSON export file"),
    ],
    email: Annotated[str, typer.Option("--email", "-e", help="Email of the user who will own the journals")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """
    Import an export file for an existing user.

    The source file is left in place.
    """
    logger = setup_cli_logging("import", verbose=verbose)

    with Session(engine) as session:
        user = resolve_user(session, email)
        logger.info(f"Importing {file_path} for user {user.id}")
        try:
            result = ImportService(session).run_import(file_path, user.id, cleanup=False)
        except ImportInputError as exc:
            console.print(f"[red]Import rejected:[/red] {exc}")
            raise typer.Exit(code=2) from None

    summary = Table(title="Import Results")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Imported", str(result.imported_count))
    summary.add_row("Skipped", str(result.skipped_count))
    summary.add_row("Failed", str(result.failed_count))
    console.print(summary)

    for failure in result.failures:
        console.print(f"[yellow]Failed:[/yellow] {failure}")
