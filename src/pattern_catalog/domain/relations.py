"""Relationship Index: one-hop 'related-to' graph derived from the store."""

from collections.abc import Iterator

from pattern_catalog.domain.errors import NotFoundError
from pattern_catalog.domain.store import EntryStore


class RelationshipIndex:
    """
    Adjacency map id -> related ids, built once from each entry's related_ids.

    No inference and no transitive closure: a relation is exactly what the
    entry declares. Targets may be dangling; the validator reports those.
    """

    def __init__(self, store: EntryStore) -> None:
        self._adjacency: dict[str, frozenset[str]] = {}
        for entry in store.all():
            self._adjacency[entry.id] = entry.related_ids

    def related_to(self, entry_id: str) -> frozenset[str]:
        """Return the ids directly related to ``entry_id``."""
        try:
            return self._adjacency[entry_id]
        except KeyError:
            raise NotFoundError(entry_id) from None

    def is_symmetric(self, entry_id: str) -> bool:
        """True if every resolvable related id lists ``entry_id`` back."""
        for target in self.related_to(entry_id):
            back = self._adjacency.get(target)
            if back is None:
                continue
            if entry_id not in back:
                return False
        return True

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield (referrer, target) pairs; referrers in insertion order, targets sorted."""
        for referrer, targets in self._adjacency.items():
            for target in sorted(targets):
                yield referrer, target

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._adjacency
