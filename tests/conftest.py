"""
Shared pytest configuration.

Settings are read when ``app`` is first imported, so the test environment
is set up here before any application module is loaded.
"""
import os
import tempfile

_TEST_TEMP_ROOT = tempfile.mkdtemp(prefix="journal-keeper-tests-")

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("IMPORT_TEMP_DIR", _TEST_TEMP_ROOT)
os.environ.setdefault("CLEANUP_RETRY_DELAY_SECONDS", "0")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import create_db_and_tables  # noqa: E402
from app.main import app  # noqa: E402
from tests.lib import ApiUser, JournalApiClient, make_api_user  # noqa: E402


@pytest.fixture(scope="session")
def test_client():
    create_db_and_tables()
    with TestClient(app, base_url="http://testserver/api/v1") as client:
        yield client


@pytest.fixture
def api_client(test_client) -> JournalApiClient:
    return JournalApiClient(client=test_client)


@pytest.fixture
def api_user(api_client: JournalApiClient) -> ApiUser:
    return make_api_user(api_client)
