import logging

from fastapi import APIRouter
from fastapi.testclient import TestClient

from tasktrack.app import create_app
from tasktrack.core.error_handlers import status_for
from tasktrack.core.exceptions import (
    ConfigError,
    ConflictError,
    ExpiredTokenError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    TaskTrackError,
    ValidationError,
)
from tasktrack.core.logging_config import setup_logging


def test_root_and_health(client):
    assert client.get("/").json() == {"success": True, "message": "Task Management API is running"}
    assert client.get("/health").json() == {"ok": True}
    assert client.get("/health/db").json() == {"ok": True}


def test_status_mapping():
    assert status_for(ValidationError()) == 400
    assert status_for(InvalidCredentialsError()) == 401
    assert status_for(MissingTokenError()) == 401
    assert status_for(InvalidTokenError()) == 401
    assert status_for(ExpiredTokenError()) == 401
    assert status_for(ForbiddenError()) == 403
    assert status_for(NotFoundError()) == 404
    assert status_for(ConflictError()) == 409
    assert status_for(ConfigError()) == 500
    assert status_for(TaskTrackError()) == 500


def _app_with_boom(settings):
    app = create_app(settings)
    router = APIRouter()

    @router.get("/boom")
    def boom():
        raise RuntimeError("kaboom internals")

    app.include_router(router)
    return app


def test_unhandled_error_shows_detail_outside_production(settings):
    with TestClient(_app_with_boom(settings), raise_server_exceptions=False) as c:
        r = c.get("/boom")

    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Internal Server Error", "error": "kaboom internals"}


def test_unhandled_error_hides_detail_in_production(settings):
    prod = settings.model_copy(update={"app_env": "prod"})
    with TestClient(_app_with_boom(prod), raise_server_exceptions=False) as c:
        r = c.get("/boom")

    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Internal Server Error"}
    assert "kaboom" not in r.text


def test_malformed_json_is_bad_request(client):
    r = client.post(
        "/api/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json()["success"] is False


def test_logging_takes_level_and_format_from_settings(settings, monkeypatch):
    root = logging.getLogger()
    app_logger = logging.getLogger("tasktrack")
    monkeypatch.setattr(root, "handlers", [])
    previous = app_logger.level

    configured = settings.model_copy(update={"log_level": "WARNING", "log_format": "%(levelname)s|%(message)s"})
    try:
        assert setup_logging(configured) is app_logger
        assert app_logger.level == logging.WARNING
    finally:
        app_logger.setLevel(previous)

    (handler,) = root.handlers
    assert handler.level == logging.WARNING
    assert handler.formatter._fmt == "%(levelname)s|%(message)s"
