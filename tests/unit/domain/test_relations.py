"""Unit tests for RelationshipIndex."""

import pytest

from pattern_catalog.domain.errors import NotFoundError
from pattern_catalog.domain.relations import RelationshipIndex
from pattern_catalog.domain.store import EntryStore


@pytest.fixture
def store(make_entry) -> EntryStore:
    store = EntryStore()
    store.put(make_entry("builder", related=["factory"]))
    store.put(make_entry("factory", related=["builder", "abstract-factory"]))
    store.put(make_entry("abstract-factory"))
    store.put(make_entry("strategy", related=["missing"]))
    return store


class TestRelationshipIndex:
    """Test adjacency, symmetry and edge iteration."""

    def test_related_to_returns_declared_ids(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        assert index.related_to("builder") == frozenset({"factory"})
        assert index.related_to("abstract-factory") == frozenset()

    def test_related_to_is_one_hop(self, store: EntryStore) -> None:
        """No transitive closure: builder -> factory -> abstract-factory stays one hop."""
        index = RelationshipIndex(store)
        assert "abstract-factory" not in index.related_to("builder")

    def test_related_to_unknown_raises(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        with pytest.raises(NotFoundError):
            index.related_to("observer")

    def test_is_symmetric(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        assert index.is_symmetric("builder")
        assert not index.is_symmetric("factory")  # abstract-factory does not list it back
        assert index.is_symmetric("abstract-factory")

    def test_is_symmetric_ignores_dangling_targets(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        assert index.is_symmetric("strategy")

    def test_edges_in_insertion_order_with_sorted_targets(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        assert list(index.edges()) == [
            ("builder", "factory"),
            ("factory", "abstract-factory"),
            ("factory", "builder"),
            ("strategy", "missing"),
        ]

    def test_contains(self, store: EntryStore) -> None:
        index = RelationshipIndex(store)
        assert "builder" in index
        assert "missing" not in index
