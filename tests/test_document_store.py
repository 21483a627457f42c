"""Tests for the SQLAlchemy document store."""

import pytest

from cyclebudget.database.base import DocumentStore
from cyclebudget.database.factories import create_sqlite_store
from cyclebudget.domain.errors import NotFoundError

COLLECTION = "artifacts/test-app/users/alice/categories"


class TestDocumentStore:
    """Tests for basic document operations."""

    def test_store_implements_interface(self, temp_store):
        assert isinstance(temp_store, DocumentStore)

    def test_add_and_get(self, temp_store):
        doc_id = temp_store.add(COLLECTION, {"name": "Groceries", "baseLimit": "200"})

        doc = temp_store.get(COLLECTION, doc_id)

        assert doc == {"id": doc_id, "name": "Groceries", "baseLimit": "200"}

    def test_get_missing_returns_none(self, temp_store):
        assert temp_store.get(COLLECTION, "missing") is None

    def test_generated_ids_are_unique(self, temp_store):
        ids = {temp_store.add(COLLECTION, {"n": i}) for i in range(5)}
        assert len(ids) == 5

    def test_list_is_scoped_to_collection(self, temp_store):
        temp_store.add(COLLECTION, {"name": "Mine"})
        temp_store.add("artifacts/test-app/users/bob/categories", {"name": "Bob's"})

        docs = temp_store.list(COLLECTION)

        assert [doc["name"] for doc in docs] == ["Mine"]

    def test_set_replaces_document(self, temp_store):
        temp_store.set(COLLECTION, "doc", {"a": 1, "b": 2})
        temp_store.set(COLLECTION, "doc", {"a": 3})

        assert temp_store.get(COLLECTION, "doc") == {"id": "doc", "a": 3}

    def test_set_merge_keeps_other_fields(self, temp_store):
        temp_store.set(COLLECTION, "doc", {"a": 1, "b": 2})
        temp_store.set(COLLECTION, "doc", {"b": 5, "c": 6}, merge=True)

        assert temp_store.get(COLLECTION, "doc") == {"id": "doc", "a": 1, "b": 5, "c": 6}

    def test_set_merge_creates_missing_document(self, temp_store):
        temp_store.set(COLLECTION, "new", {"a": 1}, merge=True)
        assert temp_store.get(COLLECTION, "new") == {"id": "new", "a": 1}

    def test_id_field_is_not_stored_in_payload(self, temp_store):
        temp_store.set(COLLECTION, "doc", {"id": "other", "a": 1})
        assert temp_store.get(COLLECTION, "doc") == {"id": "doc", "a": 1}

    def test_update_existing(self, temp_store):
        doc_id = temp_store.add(COLLECTION, {"name": "Old", "baseLimit": "1"})
        temp_store.update(COLLECTION, doc_id, {"name": "New"})

        assert temp_store.get(COLLECTION, doc_id) == {"id": doc_id, "name": "New", "baseLimit": "1"}

    def test_update_missing_raises(self, temp_store):
        with pytest.raises(NotFoundError):
            temp_store.update(COLLECTION, "missing", {"name": "New"})

    def test_delete(self, temp_store):
        doc_id = temp_store.add(COLLECTION, {"name": "Doomed"})
        temp_store.delete(COLLECTION, doc_id)

        assert temp_store.get(COLLECTION, doc_id) is None
        # Deleting again is a no-op
        temp_store.delete(COLLECTION, doc_id)

    def test_data_persists_across_store_instances(self, temp_store):
        doc_id = temp_store.add(COLLECTION, {"name": "Kept"})

        other = create_sqlite_store(database_path=temp_store.database_path)
        try:
            assert other.get(COLLECTION, doc_id)["name"] == "Kept"
        finally:
            other.disconnect()


class TestSubscriptions:
    """Tests for collection subscriptions."""

    def test_initial_snapshot_delivered_immediately(self, temp_store):
        temp_store.add(COLLECTION, {"name": "Existing"})
        snapshots = []

        temp_store.subscribe(COLLECTION, snapshots.append)

        assert len(snapshots) == 1
        assert [doc["name"] for doc in snapshots[0]] == ["Existing"]

    def test_every_write_emits_full_snapshot(self, temp_store):
        snapshots = []
        temp_store.subscribe(COLLECTION, snapshots.append)

        doc_id = temp_store.add(COLLECTION, {"name": "A"})
        temp_store.update(COLLECTION, doc_id, {"name": "B"})
        temp_store.set(COLLECTION, "other", {"name": "C"}, merge=True)
        temp_store.delete(COLLECTION, doc_id)

        assert [[doc["name"] for doc in snap] for snap in snapshots] == [
            [],
            ["A"],
            ["B"],
            ["B", "C"],
            ["C"],
        ]

    def test_writes_to_other_collections_not_delivered(self, temp_store):
        snapshots = []
        temp_store.subscribe(COLLECTION, snapshots.append)

        temp_store.add("artifacts/test-app/users/bob/categories", {"name": "Bob's"})

        assert len(snapshots) == 1

    def test_unsubscribe_stops_delivery(self, temp_store):
        snapshots = []
        unsubscribe = temp_store.subscribe(COLLECTION, snapshots.append)

        unsubscribe()
        temp_store.add(COLLECTION, {"name": "Late"})

        assert len(snapshots) == 1
        # Unsubscribing twice is harmless
        unsubscribe()
