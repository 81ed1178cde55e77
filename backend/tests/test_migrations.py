from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_DIR = Path(__file__).resolve().parents[1]


def test_upgrade_and_downgrade(tmp_path: Path) -> None:
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", url)

    command.upgrade(config, "head")
    engine = create_engine(url)
    inspector = inspect(engine)
    assert "waitlist" in inspector.get_table_names()
    assert {column["name"] for column in inspector.get_columns("waitlist")} == {"id", "email", "created_at"}
    assert [index["name"] for index in inspector.get_indexes("waitlist")] == ["ix_waitlist_email"]

    command.downgrade(config, "base")
    assert "waitlist" not in inspect(engine).get_table_names()
    engine.dispose()
