"""Shared pytest fixtures for cyclebudget tests."""

import itertools
import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
import pytest

from cyclebudget.database.factories import create_sqlite_store
from cyclebudget.database.namespace import UserNamespace
from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.settings import SettingsService
from cyclebudget.domain.transaction import TransactionService
from cyclebudget.domain.entities import (
    BaseFrequency,
    Category,
    Transaction,
    TransactionType,
)

# Fixed reference time used by tests that need a stable "now"
FIXED_NOW = datetime(2024, 5, 17, 15, 30, tzinfo=UTC)

_transaction_ids = itertools.count(1)


def make_category(
    id="cat-1",
    name="Groceries",
    base_limit="200",
    base_frequency=BaseFrequency.MONTHLY,
    color=None,
    icon=None,
):
    """Build a Category entity with sensible defaults."""
    return Category(
        id=id,
        name=name,
        base_limit=Decimal(base_limit),
        base_frequency=base_frequency,
        color=color,
        icon=icon,
    )


def make_transaction(
    amount,
    timestamp=FIXED_NOW,
    type=TransactionType.EXPENSE,
    category_id="cat-1",
    source="Card",
    id=None,
):
    """Build a Transaction entity with sensible defaults."""
    return Transaction(
        id=id or f"txn-{next(_transaction_ids)}",
        amount=Decimal(str(amount)),
        type=type,
        category_id=category_id,
        source=source,
        timestamp=timestamp,
    )


@pytest.fixture
def temp_store():
    """Create a temporary document store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def namespace():
    """Namespace of the user under test."""
    return UserNamespace(app_id="test-app", user_id="alice")


@pytest.fixture
def category_service(temp_store, namespace):
    """Create a CategoryService with a temporary store."""
    return CategoryService(temp_store, namespace)


@pytest.fixture
def settings_service(temp_store, namespace):
    """Create a SettingsService with a temporary store."""
    return SettingsService(temp_store, namespace)


@pytest.fixture
def transaction_service(temp_store, namespace):
    """Create a TransactionService with a fixed clock."""
    return TransactionService(temp_store, namespace, clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_categories(category_service):
    """Create a few categories and return their IDs by name."""
    return {
        "Groceries": category_service.create_category(
            name="Groceries", base_limit=Decimal("200"), base_frequency="monthly"
        ),
        "Coffee": category_service.create_category(
            name="Coffee", base_limit=Decimal("5"), base_frequency="daily"
        ),
        "Insurance": category_service.create_category(
            name="Insurance", base_limit=Decimal("150"), base_frequency="bimonthly"
        ),
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_store):
    """Global CLI options pointing at the temporary store."""
    return ["--db-path", temp_store.database_path, "--app-id", "test-app", "--user", "alice"]
