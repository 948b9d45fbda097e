import sqlite3
from pathlib import Path

from alembic import command
from alembic.config import Config

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def alembic_config(db_path: Path) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    cfg.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    return cfg


def table_names(db_path: Path) -> set[str]:
    with sqlite3.connect(db_path) as conn:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    return {name for (name,) in rows} - {"alembic_version"}


def test_upgrade_creates_schema(tmp_path):
    db_path = tmp_path / "migrations.db"
    command.upgrade(alembic_config(db_path), "head")

    assert table_names(db_path) == {
        "users",
        "refresh_tokens",
        "quizzes",
        "quiz_selections",
        "quiz_suites",
        "quiz_attempts",
    }
    with sqlite3.connect(db_path) as conn:
        indexes = {row[1]: row[2] for row in conn.execute("PRAGMA index_list('refresh_tokens')")}
    assert indexes["ix_refresh_tokens_token_hash"] == 1


def test_downgrade_drops_schema(tmp_path):
    db_path = tmp_path / "migrations.db"
    cfg = alembic_config(db_path)
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    assert table_names(db_path) == set()
