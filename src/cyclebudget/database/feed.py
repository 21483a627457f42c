"""Live budget feed.

Owns the store subscriptions for one user and recomputes the summary and
trend from a complete snapshot whenever categories, transactions or
settings change. The aggregation functions themselves stay pure.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Callable, Optional

from cyclebudget.database.base import Document, DocumentStore, Unsubscribe
from cyclebudget.database.mappers import (
    category_from_document,
    settings_from_document,
    transaction_from_document,
)
from cyclebudget.database.namespace import SETTINGS_DOC_ID, UserNamespace
from cyclebudget.domain.category import sort_categories
from cyclebudget.domain.constants import DEFAULT_TREND_CYCLES
from cyclebudget.domain.entities import Category, Settings, Summary, Transaction, TrendPoint
from cyclebudget.domain.summary import summarize
from cyclebudget.domain.trend import build_trend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetView:
    """Everything the presentation layer renders for one snapshot."""

    settings: Settings
    summary: Summary
    trend: tuple[TrendPoint, ...]


class BudgetFeed:
    """Recompute a BudgetView on every change to a user's data."""

    def __init__(
        self,
        store: DocumentStore,
        namespace: UserNamespace,
        on_update: Callable[[BudgetView], None],
        clock: Optional[Callable[[], datetime]] = None,
        trend_count: int = DEFAULT_TREND_CYCLES,
    ):
        self.store = store
        self.namespace = namespace
        self.on_update = on_update
        self.clock = clock or (lambda: datetime.now(UTC))
        self.trend_count = trend_count

        self._categories: list[Category] = []
        self._transactions: list[Transaction] = []
        self._settings = Settings()
        self._unsubscribers: list[Unsubscribe] = []
        self._started = False

    @property
    def running(self) -> bool:
        return self._started

    def start(self) -> None:
        """Subscribe to the user's collections and emit the first view."""
        if self._started:
            return

        # Initial snapshots arrive synchronously; emit once they are all in.
        self._unsubscribers = [
            self.store.subscribe(self.namespace.categories, self._on_categories),
            self.store.subscribe(self.namespace.transactions, self._on_transactions),
            self.store.subscribe(self.namespace.settings, self._on_settings),
        ]
        self._started = True
        self._emit()

    def stop(self) -> None:
        """Cancel all subscriptions."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._started = False

    def current_view(self) -> BudgetView:
        """Compute a view from the latest snapshot."""
        now = self.clock()
        return BudgetView(
            settings=self._settings,
            summary=summarize(self._categories, self._transactions, self._settings, now=now),
            trend=tuple(
                build_trend(
                    self._transactions,
                    self._settings.cycle_months,
                    now=now,
                    count=self.trend_count,
                )
            ),
        )

    def _on_categories(self, docs: list[Document]) -> None:
        self._categories = sort_categories([category_from_document(doc) for doc in docs])
        self._emit()

    def _on_transactions(self, docs: list[Document]) -> None:
        self._transactions = [transaction_from_document(doc) for doc in docs]
        self._emit()

    def _on_settings(self, docs: list[Document]) -> None:
        settings_doc = next((doc for doc in docs if doc.get("id") == SETTINGS_DOC_ID), None)
        self._settings = settings_from_document(settings_doc)
        self._emit()

    def _emit(self) -> None:
        if not self._started:
            return
        logger.debug("Recomputing budget view for %s", self.namespace.root)
        self.on_update(self.current_view())
