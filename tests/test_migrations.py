import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config

from conftest import ROOT


@pytest.fixture
def alembic_cfg(tmp_path):
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.attributes["database_url"] = f"sqlite:///{tmp_path / 'migrate.db'}"
    return cfg


def _inspect(cfg):
    engine = sa.create_engine(cfg.attributes["database_url"])
    try:
        insp = sa.inspect(engine)
        tables = set(insp.get_table_names())
        columns = {t: {c["name"] for c in insp.get_columns(t)} for t in tables & {"user", "task"}}
        fks = insp.get_foreign_keys("task") if "task" in tables else []
        indexes = {i["name"] for t in tables & {"user", "task"} for i in insp.get_indexes(t)}
    finally:
        engine.dispose()
    return tables, columns, fks, indexes


def test_upgrade_creates_user_and_task_tables(alembic_cfg):
    command.upgrade(alembic_cfg, "head")

    tables, columns, fks, indexes = _inspect(alembic_cfg)

    assert {"user", "task"} <= tables
    assert columns["user"] == {"id", "email", "password_hash", "name", "created_at", "updated_at"}
    assert columns["task"] == {
        "id", "title", "description", "status", "user_id", "created_at", "updated_at",
    }
    assert {"ix_user_email", "ix_task_user_id", "ix_task_created_at"} <= indexes

    (fk,) = fks
    assert fk["referred_table"] == "user"
    assert fk["constrained_columns"] == ["user_id"]
    assert fk["options"].get("ondelete") == "CASCADE"


def test_downgrade_drops_everything(alembic_cfg):
    command.upgrade(alembic_cfg, "head")
    command.downgrade(alembic_cfg, "base")

    tables, *_ = _inspect(alembic_cfg)

    assert not {"user", "task"} & tables
