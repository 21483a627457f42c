"""Store factory functions for creating document store instances."""

from pathlib import Path
from typing import Optional

from cyclebudget.database.sqlalchemy_db import SQLAlchemyDocumentStore


def default_database_path() -> str:
    """Return ~/.cyclebudget/cyclebudget.db, creating the directory."""
    db_dir = Path.home() / ".cyclebudget"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "cyclebudget.db")


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyDocumentStore:
    """Create a SQLite-backed document store.

    Args:
        database_path: Path to SQLite database file. If None, defaults to
            ~/.cyclebudget/cyclebudget.db

    Returns:
        SQLAlchemyDocumentStore instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDocumentStore(database_url)
