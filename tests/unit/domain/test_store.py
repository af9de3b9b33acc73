"""Unit tests for EntryStore."""

import pytest

from pattern_catalog.domain.entities import Category
from pattern_catalog.domain.errors import (
    CatalogStateError,
    DuplicateIdError,
    NotFoundError,
)
from pattern_catalog.domain.store import EntryStore


class TestEntryStore:
    """Test put/get/all/by_category and sealing."""

    def test_get_returns_put_entry(self, make_entry) -> None:
        store = EntryStore()
        entries = [make_entry("builder"), make_entry("factory"), make_entry("comments", Category.SMELL)]
        for entry in entries:
            store.put(entry)
        for entry in entries:
            assert store.get(entry.id) == entry

    def test_duplicate_put_fails_and_keeps_store_unchanged(self, make_entry) -> None:
        store = EntryStore()
        original = make_entry("builder", title="Builder")
        store.put(original)
        with pytest.raises(DuplicateIdError) as excinfo:
            store.put(make_entry("builder", title="Other Builder"))
        assert excinfo.value.entry_id == "builder"
        assert store.get("builder") is original
        assert len(store) == 1

    def test_get_unknown_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError) as excinfo:
            EntryStore().get("nope")
        assert str(excinfo.value) == "no such entry: nope"

    def test_not_found_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            EntryStore().get("nope")

    def test_all_preserves_insertion_order(self, make_entry) -> None:
        store = EntryStore()
        for entry_id in ["c", "a", "b"]:
            store.put(make_entry(entry_id))
        assert [e.id for e in store.all()] == ["c", "a", "b"]

    def test_all_is_restartable(self, make_entry) -> None:
        """Each call is a fresh traversal, independent of earlier ones."""
        store = EntryStore()
        store.put(make_entry("a"))
        store.put(make_entry("b"))
        first = store.all()
        next(first)
        assert [e.id for e in store.all()] == ["a", "b"]
        assert [e.id for e in first] == ["b"]

    def test_by_category_filters_in_order(self, make_entry) -> None:
        store = EntryStore()
        store.put(make_entry("magic-numbers", Category.SMELL))
        store.put(make_entry("builder", Category.PATTERN))
        store.put(make_entry("comments", Category.SMELL))
        assert [e.id for e in store.by_category(Category.SMELL)] == ["magic-numbers", "comments"]
        assert [e.id for e in store.by_category(Category.PATTERN)] == ["builder"]

    def test_replace_keeps_position(self, make_entry) -> None:
        store = EntryStore()
        store.put(make_entry("a"))
        store.put(make_entry("b"))
        fixed = make_entry("a", title="Fixed")
        store.replace(fixed)
        assert [e.id for e in store.all()] == ["a", "b"]
        assert store.get("a") is fixed

    def test_replace_unknown_raises(self, make_entry) -> None:
        with pytest.raises(NotFoundError):
            EntryStore().replace(make_entry("a"))

    def test_sealed_store_rejects_writes(self, make_entry) -> None:
        store = EntryStore()
        store.put(make_entry("a"))
        store.seal()
        with pytest.raises(CatalogStateError):
            store.put(make_entry("b"))
        with pytest.raises(CatalogStateError):
            store.replace(make_entry("a"))
        assert [e.id for e in store.all()] == ["a"]

    def test_contains(self, make_entry) -> None:
        store = EntryStore()
        store.put(make_entry("a"))
        assert "a" in store
        assert "b" not in store
