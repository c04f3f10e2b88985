"""
Main CLI application using Typer.

Entry point: python -m app.cli
CLI Name: journal-admin
"""
import typer

from app import __version__ as app_version
from app.cli.commands import auth, import_cmd, migrate

app = typer.Typer(
    name="journal-admin",
    help="Journal Keeper Admin CLI - maintenance tools for a self-hosted instance",
)


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"Journal Keeper CLI version {app_version}")

# Register command groups


app.add_typer(import_cmd.app, name="import")
app.add_typer(auth.app, name="auth")
app.add_typer(migrate.app, name="migrate")
