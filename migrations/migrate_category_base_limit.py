#!/usr/bin/env python3
"""Migration script to rewrite legacy category documents.

Older category documents stored their limit as ``budgetLimit`` and had no
``baseFrequency``. Categories are already normalized when they are loaded,
so this migration is optional; it rewrites the stored documents once so that
other readers of the store see the canonical shape:
- ``baseLimit`` taken from ``baseLimit``, else ``budgetLimit``, else 0
- ``baseFrequency`` set to ``monthly`` when missing or unknown
- ``budgetLimit`` removed

Usage:
    python migrations/migrate_category_base_limit.py [--db-path PATH] [--dry-run]
"""

import sys
from pathlib import Path

# Add src to path so we can import cyclebudget modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import inspect
from cyclebudget.database.factories import create_sqlite_store
from cyclebudget.database.mappers import migrate_category_document
from cyclebudget.database.models import StoredDocument


def needs_migration(data: dict) -> bool:
    """Check if a stored category payload is not yet canonical.

    Args:
        data: Stored document payload (without its ID)

    Returns:
        True if the payload would change when migrated
    """
    canonical = migrate_category_document(data)
    return canonical != data


def migrate_database(database_path: str | None = None, dry_run: bool = False) -> int:
    """Rewrite every legacy category document in the store.

    Args:
        database_path: Path to database file. If None, uses default location.
        dry_run: If True, only report what would change

    Returns:
        Number of documents migrated (or that would be migrated)
    """
    store = create_sqlite_store(database_path=database_path)
    store.connect()

    try:
        session = store.session_factory()
        try:
            engine = session.bind
            if engine is None:
                raise Exception("Could not get database engine from session")

            if "documents" not in inspect(engine).get_table_names():
                raise Exception("Table 'documents' does not exist. Please initialize the store first.")

            rows = (
                session.query(StoredDocument)
                .filter(StoredDocument.collection.like("%/categories"))
                .all()
            )
            migrated = 0
            for row in rows:
                data = dict(row.data or {})
                if not needs_migration(data):
                    continue
                migrated += 1
                print(f"  {row.collection}/{row.doc_id}: {data} -> {migrate_category_document(data)}")
                if not dry_run:
                    row.data = migrate_category_document(data)

            if dry_run:
                print(f"Dry run: {migrated} category document(s) would be migrated")
            else:
                session.commit()
                print(f"Migrated {migrated} category document(s)")
            return migrated
        finally:
            session.close()

    except Exception as e:
        print(f"Migration failed: {e}")
        raise
    finally:
        store.disconnect()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Rewrite legacy category documents into the canonical shape"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (defaults to ~/.cyclebudget/cyclebudget.db)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report changes without writing them",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path, dry_run=args.dry_run)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
