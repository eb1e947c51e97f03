"""Alembic environment for tasktrack.

The database URL comes from ``config.attributes["database_url"]`` when a
caller (tests, scripts) passes one in, and from ``Settings`` otherwise.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from tasktrack.core.config import Settings
from tasktrack.db.session import build_db_url

import tasktrack.models  # noqa: F401  registers the tables on SQLModel.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _database_url() -> str:
    raw = config.attributes.get("database_url") or Settings().database_url
    return build_db_url(raw)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=SQLModel.metadata, compare_type=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_offline(url: str) -> None:
    _configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})


def run_online(url: str) -> None:
    engine = create_engine(url, poolclass=NullPool)
    try:
        with engine.connect() as connection:
            _configure(
                connection=connection,
                render_as_batch=connection.dialect.name == "sqlite",
            )
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_offline(_database_url())
else:
    run_online(_database_url())
