# tasktrack/app.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from tasktrack.core.config import Settings
from tasktrack.core.error_handlers import register_exception_handlers
from tasktrack.core.logging_config import setup_logging
from tasktrack.core.tokens import TokenService
from tasktrack.db.session import build_engine, create_all_tables
from tasktrack.routers import auth, health, task

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API with explicit dependencies.

    Settings, engine and token service live on ``app.state`` for the
    lifetime of the process; request dependencies read them from there.
    """
    settings = settings or Settings()
    setup_logging(settings)

    engine = engine or build_engine(settings.database_url)
    if settings.auto_create_tables:
        create_all_tables(engine)

    app = FastAPI(
        title="Task Management API",
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.token_service = TokenService.from_settings(settings)

    if not settings.jwt_secret or not settings.jwt_refresh_secret:
        logger.warning("JWT_SECRET / JWT_REFRESH_SECRET not set; token endpoints will fail")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    # 라우터 등록
    app.include_router(health.router)
    app.include_router(auth.auth_router)
    app.include_router(task.router)

    logger.info("tasktrack started (env=%s)", settings.app_env)
    return app
