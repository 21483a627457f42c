"""Abstract document store interface."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

Document = dict[str, Any]
SnapshotCallback = Callable[[list[Document]], None]
Unsubscribe = Callable[[], None]


class DocumentStore(ABC):
    """Abstract key-value document store for cyclebudget.

    Documents live in collections addressed by a path string. Documents
    returned by ``get`` and ``list`` carry their identifier under ``"id"``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize backing storage (create tables)."""
        pass

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        """Get a document by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def list(self, collection: str) -> list[Document]:
        """List every document in a collection."""
        pass

    @abstractmethod
    def add(self, collection: str, data: Document) -> str:
        """Add a document under a generated ID. Returns the ID."""
        pass

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: Document, merge: bool = False) -> None:
        """Write a document.

        With ``merge=True`` only the supplied fields are overwritten and the
        document is created if missing; otherwise the document is replaced.
        """
        pass

    @abstractmethod
    def update(self, collection: str, doc_id: str, fields: Document) -> None:
        """Overwrite fields of an existing document.

        Raises:
            NotFoundError: If the document does not exist
        """
        pass

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting a missing document is a no-op."""
        pass

    @abstractmethod
    def subscribe(self, collection: str, callback: SnapshotCallback) -> Unsubscribe:
        """Watch a collection.

        The callback receives the full collection right away and again after
        every write to it. Returns a function that cancels the subscription.
        """
        pass
