"""Query façade and Loading/Ready lifecycle of the pattern catalog."""

import logging
from collections.abc import Iterable, Iterator
from typing import cast

from pattern_catalog.domain.entities import (
    CatalogState,
    Category,
    Entry,
    ValidationReport,
)
from pattern_catalog.domain.errors import CatalogStateError
from pattern_catalog.domain.relations import RelationshipIndex
from pattern_catalog.domain.store import EntryStore
from pattern_catalog.domain.validator import CatalogValidator


class Catalog:
    """
    Single entry point for consumers of the catalog.

    LOADING: ``put``/``replace``/``load`` allowed, queries rejected.
    READY: queries allowed, mutations rejected. Reached once through
    ``finalize()``, which validates the content; there is no way back.
    A Ready catalog is never mutated, so it can be shared between readers
    without locking.
    """

    def __init__(self, validator: CatalogValidator | None = None) -> None:
        self._store = EntryStore()
        self._validator = validator or CatalogValidator()
        self._index: RelationshipIndex | None = None
        self._report: ValidationReport | None = None
        self._state = CatalogState.LOADING

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def report(self) -> ValidationReport | None:
        """Report of the successful finalize(), None while Loading."""
        return self._report

    def __len__(self) -> int:
        return len(self._store)

    # Loading phase

    def put(self, entry: Entry) -> None:
        self._require(CatalogState.LOADING, "put")
        self._store.put(entry)

    def replace(self, entry: Entry) -> None:
        """Swap in a corrected version of an entry already loaded."""
        self._require(CatalogState.LOADING, "replace")
        self._store.replace(entry)

    def load(self, entries: Iterable[Entry]) -> None:
        """Put every entry; stops at the first DuplicateIdError, keeping earlier ones."""
        for entry in entries:
            self.put(entry)

    def finalize(self) -> ValidationReport:
        """
        Validate and move to READY.

        On any validation error the catalog stays in LOADING and the first
        error is raised with the full report attached as ``error.report``.
        """
        self._require(CatalogState.LOADING, "finalize")
        index = RelationshipIndex(self._store)
        report = self._validator.validate(self._store, index)
        if not report.is_valid:
            logging.warning(
                "Catalog finalize failed with %d error(s)", len(report.errors))
            first = report.errors[0]
            first.report = report
            raise first

        self._store.seal()
        self._index = index
        self._report = report
        self._state = CatalogState.READY
        logging.info(
            "Catalog ready: %d entries, %d warning(s)", len(self._store), len(report.warnings))
        return report

    # Ready phase

    def find_by_id(self, entry_id: str) -> Entry:
        self._require(CatalogState.READY, "find_by_id")
        return self._store.get(entry_id)

    def all(self) -> Iterator[Entry]:
        self._require(CatalogState.READY, "all")
        return self._store.all()

    def by_category(self, category: Category) -> Iterator[Entry]:
        self._require(CatalogState.READY, "by_category")
        return self._store.by_category(category)

    def search(self, keyword: str) -> Iterator[Entry]:
        """
        Case-insensitive substring match on title and summary.

        Exact title matches come first, then the remaining hits in insertion
        order. A blank keyword matches nothing.
        """
        self._require(CatalogState.READY, "search")
        return self._search(keyword.strip().casefold())

    def _search(self, needle: str) -> Iterator[Entry]:
        if not needle:
            return
        exact: set[str] = set()
        for entry in self._store.all():
            if entry.title.casefold() == needle:
                exact.add(entry.id)
                yield entry
        for entry in self._store.all():
            if entry.id in exact:
                continue
            if needle in entry.title.casefold() or needle in entry.summary.casefold():
                yield entry

    def related(self, entry_id: str) -> list[Entry]:
        """Entries directly related to ``entry_id``, in catalog order."""
        related_ids = self._ready_index("related").related_to(entry_id)
        return [entry for entry in self._store.all() if entry.id in related_ids]

    def related_ids(self, entry_id: str) -> frozenset[str]:
        return self._ready_index("related_ids").related_to(entry_id)

    def _ready_index(self, operation: str) -> RelationshipIndex:
        self._require(CatalogState.READY, operation)
        # finalize() sets the index before the state becomes READY
        return cast(RelationshipIndex, self._index)

    def _require(self, state: CatalogState, operation: str) -> None:
        if self._state is not state:
            raise CatalogStateError(
                f"{operation}() is not allowed while the catalog is {self._state.value}")
