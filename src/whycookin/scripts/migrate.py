# src/whycookin/scripts/migrate.py
"""Apply Alembic migrations up to head, or create tables directly for SQLite."""
from __future__ import annotations

import argparse
from pathlib import Path

from alembic import command
from alembic.config import Config

from whycookin.core.settings import settings
from whycookin.db.session import create_tables

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def build_config() -> Config:
    """Return an Alembic config pointed at the project's migrations."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", settings.database_url_sync)
    return cfg


def run_upgrade_head() -> None:
    command.upgrade(build_config(), "head")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bring the configured database schema up to date")
    parser.add_argument(
        "--create-all",
        action="store_true",
        help="Create tables from the ORM metadata instead of running migrations.",
    )
    args = parser.parse_args(argv)
    if args.create_all:
        create_tables()
    else:
        run_upgrade_head()


if __name__ == "__main__":
    main()
