from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tasktrack.app import create_app  # noqa: E402
from tasktrack.core.config import Settings  # noqa: E402
from tasktrack.core.tokens import TokenService  # noqa: E402
from tasktrack.db.session import session_scope  # noqa: E402

TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"
TEST_PASSWORD = "pw123456"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test",
        database_url="sqlite://",
        auto_create_tables=True,
        jwt_secret=TEST_ACCESS_SECRET,
        jwt_refresh_secret=TEST_REFRESH_SECRET,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    with session_scope(app.state.engine) as s:
        yield s


@pytest.fixture
def token_service(settings) -> TokenService:
    return TokenService.from_settings(settings)


def register_and_login(client: TestClient, email: str, password: str = TEST_PASSWORD, name=None) -> dict:
    """Register + login; returns the login ``data`` block."""
    body = {"email": email, "password": password}
    if name is not None:
        body["name"] = name
    r = client.post("/api/auth/register", json=body)
    assert r.status_code == 201, r.text
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["data"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client) -> dict:
    return register_and_login(client, "alice@example.com")


@pytest.fixture
def bob(client) -> dict:
    return register_and_login(client, "bob@example.com")
