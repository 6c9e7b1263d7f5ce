"""Tests for the per-browser session identifier."""
from uuid import UUID

from realty_chat.session_identity import SessionIdentifierManager
from realty_chat.storage import KeyValueStore, MappingKeyValueStore, MemoryKeyValueStore


class BrokenStore(KeyValueStore):
    """Store whose backend is unavailable."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage unavailable")


class ReadOnlyStore(MemoryKeyValueStore):
    def set(self, key, value):
        raise PermissionError("quota exceeded")


def test_fresh_store_creates_and_persists_id():
    store = MemoryKeyValueStore()
    manager = SessionIdentifierManager(store)

    session_id = manager.session_id

    UUID(session_id)
    assert store.get("sessionId") == session_id


def test_id_is_stable_across_reloads():
    store = MemoryKeyValueStore()
    first = SessionIdentifierManager(store).session_id

    for _ in range(5):
        assert SessionIdentifierManager(store).session_id == first


def test_existing_id_is_reused_untouched():
    store = MemoryKeyValueStore({"sessionId": "abc-123"})
    assert SessionIdentifierManager(store).session_id == "abc-123"
    assert store.get("sessionId") == "abc-123"


def test_custom_key():
    store = MemoryKeyValueStore()
    session_id = SessionIdentifierManager(store, key="chatSession").session_id
    assert store.get("chatSession") == session_id
    assert store.get("sessionId") is None


def test_id_cached_per_manager():
    manager = SessionIdentifierManager(MemoryKeyValueStore())
    assert manager.session_id == manager.session_id


def test_broken_store_degrades_to_ephemeral_id():
    first = SessionIdentifierManager(BrokenStore()).session_id
    second = SessionIdentifierManager(BrokenStore()).session_id

    UUID(first)
    assert first != second


def test_failed_write_still_yields_id():
    session_id = SessionIdentifierManager(ReadOnlyStore()).session_id
    UUID(session_id)


def test_mapping_store_wraps_plain_dict():
    backing = {}
    store = MappingKeyValueStore(backing)

    session_id = SessionIdentifierManager(store).session_id

    assert backing == {"sessionId": session_id}
    assert SessionIdentifierManager(MappingKeyValueStore(backing)).session_id == session_id
