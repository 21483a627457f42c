"""Document store layer for cyclebudget application."""

from cyclebudget.database.base import DocumentStore
from cyclebudget.database.factories import create_sqlite_store
from cyclebudget.database.namespace import UserNamespace

__all__ = ["DocumentStore", "create_sqlite_store", "UserNamespace", "BudgetFeed", "BudgetView"]


# The feed depends on the domain services, which import this package;
# load it lazily to avoid circular dependencies
def __getattr__(name):
    if name in ("BudgetFeed", "BudgetView"):
        from cyclebudget.database import feed
        return getattr(feed, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
