import json
import uuid

from sqlmodel import Session, select
from typer.testing import CliRunner

from app.cli.cli import app
from app.core.database import create_db_and_tables, engine
from app.models.journal import Journal
from app.models.user import User

runner = CliRunner()


def _create_user() -> User:
    create_db_and_tables()
    with Session(engine) as session:
        user = User(
            email=f"cli_{uuid.uuid4().hex[:8]}@example.com",
            password="hashed_password",
            name="CLI User",
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user


def test_import_run_imports_and_keeps_source(tmp_path):
    user = _create_user()
    source = tmp_path / "export.json"
    source.write_text(
        json.dumps({
            "entries": [
                {"text": "From the CLI\nbody", "creationDate": "2024-01-01T00:00:00Z", "modifiedDate": "2024-01-01T00:00:00Z"},
                {"text": "no dates"},
            ]
        }),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["import", "run", str(source), "--email", user.email])

    assert result.exit_code == 0, result.output
    assert "Import Results" in result.output
    assert source.exists()
    with Session(engine) as session:
        titles = session.exec(select(Journal.title).where(Journal.user_id == user.id)).all()
    assert titles == ["From the CLI"]


def test_import_run_rejects_malformed_document(tmp_path):
    user = _create_user()
    source = tmp_path / "export.json"
    source.write_text('{"entries": 5}', encoding="utf-8")

    result = runner.invoke(app, ["import", "run", str(source), "--email", user.email])

    assert result.exit_code == 2
    assert "Import rejected" in result.output


def test_import_run_unknown_user(tmp_path):
    source = tmp_path / "export.json"
    source.write_text('{"entries": []}', encoding="utf-8")
    create_db_and_tables()

    result = runner.invoke(app, ["import", "run", str(source), "--email", "nobody@example.com"])

    assert result.exit_code == 1


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "Journal Keeper CLI version" in result.output


def test_purge_revoked_with_confirmation_flag():
    create_db_and_tables()

    result = runner.invoke(app, ["auth", "purge-revoked", "--yes"])

    assert result.exit_code == 0
    assert "Purged" in result.output


def test_purge_revoked_aborts_without_confirmation():
    create_db_and_tables()

    result = runner.invoke(app, ["auth", "purge-revoked"], input="n\n")

    assert result.exit_code == 0
    assert "Aborted" in result.output
