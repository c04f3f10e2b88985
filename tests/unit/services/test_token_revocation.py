"""
Unit tests for the token revocation stores.
"""
from datetime import timedelta

import pytest
from sqlmodel import Session, create_engine, select

from app.core.time_utils import utc_now
from app.models.base import BaseModel
from app.models.revoked_token import RevokedToken
from app.services.token_revocation import DatabaseRevocationStore, InMemoryRevocationStore


def _setup_session():
    """Create an in-memory SQLite session for testing."""
    engine = create_engine("sqlite:///:memory:")
    BaseModel.metadata.create_all(engine)
    return Session(engine)


@pytest.fixture(params=["memory", "database"])
def store(request):
    if request.param == "memory":
        return InMemoryRevocationStore()
    return DatabaseRevocationStore(_setup_session())


def test_revoked_token_is_reported(store):
    assert not store.is_revoked("token-a")

    store.revoke("token-a", utc_now() + timedelta(hours=1))

    assert store.is_revoked("token-a")
    assert not store.is_revoked("token-b")


def test_revoking_twice_is_harmless(store):
    expires = utc_now() + timedelta(hours=1)
    store.revoke("token-a", expires)
    store.revoke("token-a", expires)

    assert store.is_revoked("token-a")


def test_purge_removes_only_expired(store):
    store.revoke("expired", utc_now() - timedelta(minutes=5))
    store.revoke("live", utc_now() + timedelta(hours=1))

    assert store.purge_expired() == 1
    assert not store.is_revoked("expired")
    assert store.is_revoked("live")


def test_database_store_keeps_one_row_per_token():
    session = _setup_session()
    store = DatabaseRevocationStore(session)

    store.revoke("token-a", utc_now() + timedelta(hours=1))
    store.revoke("token-a", utc_now() + timedelta(hours=1))

    assert len(session.exec(select(RevokedToken)).all()) == 1
