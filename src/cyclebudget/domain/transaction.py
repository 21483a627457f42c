"""Transaction domain service.

The ledger is append-only: entries are created and deleted, never edited.
"""

from datetime import datetime, UTC
from decimal import Decimal
from typing import Callable, Optional

from cyclebudget.database.base import DocumentStore
from cyclebudget.database.mappers import (
    transaction_from_document,
    transaction_to_document,
)
from cyclebudget.database.namespace import UserNamespace
from cyclebudget.domain.constants import (
    INCOME_CATEGORY_ID,
    UNKNOWN_EXPENSE_SOURCE,
    UNKNOWN_INCOME_SOURCE,
)
from cyclebudget.domain.entities import Transaction, TransactionType
from cyclebudget.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    non_positive_amount,
    transaction_not_found,
)
from cyclebudget.domain.ledger import sort_newest_first
from cyclebudget.utils.amount_parser import coerce_amount


class TransactionService:
    """Service for recording and removing ledger entries."""

    def __init__(
        self,
        store: DocumentStore,
        namespace: UserNamespace,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize transaction service.

        Args:
            store: Document store instance
            namespace: Collection paths of the user being served
            clock: Returns the creation time for new entries; defaults to
                the current UTC time
        """
        self.store = store
        self.namespace = namespace
        self.clock = clock or (lambda: datetime.now(UTC))

    def add_expense(
        self, amount: Decimal | str, category_id: str, source: Optional[str] = None
    ) -> str:
        """Record an expense against a category.

        Args:
            amount: Positive amount spent
            category_id: Category the expense belongs to
            source: Payment source; blank becomes "Unknown"

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is not positive
            NotFoundError: If the category does not exist
        """
        amount = _validate_amount(amount)
        if not category_id or self.store.get(self.namespace.categories, category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        return self._add(
            amount,
            TransactionType.EXPENSE,
            category_id,
            (source or "").strip() or UNKNOWN_EXPENSE_SOURCE,
        )

    def add_income(self, amount: Decimal | str, source: Optional[str] = None) -> str:
        """Record an income (funding) entry.

        Args:
            amount: Positive amount received
            source: Income source; blank becomes "Uncategorized Income"

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is not positive
        """
        amount = _validate_amount(amount)
        return self._add(
            amount,
            TransactionType.BUDGET,
            INCOME_CATEGORY_ID,
            (source or "").strip() or UNKNOWN_INCOME_SOURCE,
        )

    def _add(
        self, amount: Decimal, txn_type: TransactionType, category_id: str, source: str
    ) -> str:
        document = transaction_to_document(
            amount=amount,
            txn_type=txn_type,
            category_id=category_id,
            source=source,
            timestamp=self.clock(),
        )
        return self.store.add(self.namespace.transactions, document)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction or None if not found
        """
        doc = self.store.get(self.namespace.transactions, transaction_id)
        if doc is None:
            return None
        return transaction_from_document(doc)

    def list_transactions(self, newest_first: bool = False) -> list[Transaction]:
        """List the whole ledger.

        Args:
            newest_first: If True, sort by timestamp descending; otherwise
                keep store order

        Returns:
            List of Transaction entities
        """
        transactions = [
            transaction_from_document(doc)
            for doc in self.store.list(self.namespace.transactions)
        ]
        if newest_first:
            return sort_newest_first(transactions)
        return transactions

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a ledger entry.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        if self.store.get(self.namespace.transactions, transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.store.delete(self.namespace.transactions, transaction_id)


def _validate_amount(amount) -> Decimal:
    value = coerce_amount(amount)
    if value <= 0:
        raise ValidationError(non_positive_amount(amount))
    return value
