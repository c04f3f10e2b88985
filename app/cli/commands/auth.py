"""
Authentication maintenance commands.
"""
from typing import Annotated

import typer
from rich.console import Console
from sqlmodel import Session

from app.cli.commands.utils import confirm_action
from app.cli.logging import setup_cli_logging
from app.core.database import engine
from app.services.token_revocation import DatabaseRevocationStore

app = typer.Typer(help="Authentication maintenance")
console = Console()


@app.command("purge-revoked")
def purge_revoked(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation prompt")] = False,
):
    """Delete revoked tokens that have expired anyway."""
    setup_cli_logging("auth")
    if not yes and not confirm_action("Delete expired revoked tokens?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=0)

    with Session(engine) as session:
        purged = DatabaseRevocationStore(session).purge_expired()
    console.print(f"[green]Purged {purged} expired revoked tokens[/green]")
