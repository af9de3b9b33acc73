"""Entry Store: authoritative id -> Entry mapping."""

from collections.abc import Iterator

from pattern_catalog.domain.entities import Category, Entry
from pattern_catalog.domain.errors import (
    CatalogStateError,
    DuplicateIdError,
    NotFoundError,
)


class EntryStore:
    """
    Holds catalog entries keyed by id, in insertion order.

    Writable until ``seal()``; after that every operation is a pure read.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._sealed = False

    def seal(self) -> None:
        """Reject further writes. There is no way to unseal."""
        self._sealed = True

    def put(self, entry: Entry) -> None:
        """Insert a new entry. A failed put leaves the store unchanged."""
        self._check_writable()
        if entry.id in self._entries:
            raise DuplicateIdError(entry.id)
        self._entries[entry.id] = entry

    def replace(self, entry: Entry) -> None:
        """Overwrite an existing entry with the same id, keeping its position."""
        self._check_writable()
        if entry.id not in self._entries:
            raise NotFoundError(entry.id)
        self._entries[entry.id] = entry

    def get(self, entry_id: str) -> Entry:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise NotFoundError(entry_id) from None

    def all(self) -> Iterator[Entry]:
        """Fresh lazy traversal in insertion order on every call."""
        return (entry for entry in self._entries.values())

    def by_category(self, category: Category) -> Iterator[Entry]:
        return (entry for entry in self._entries.values() if entry.category is category)

    def _check_writable(self) -> None:
        if self._sealed:
            raise CatalogStateError("entry store is sealed; the catalog is read-only")

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
