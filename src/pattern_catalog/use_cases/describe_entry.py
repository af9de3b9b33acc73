"""Use Case: Describe one entry together with its related entries."""

from dataclasses import dataclass

from pattern_catalog.domain.catalog import Catalog
from pattern_catalog.domain.entities import Entry
from pattern_catalog.domain.errors import AsymmetricRelationWarning


@dataclass(frozen=True)
class EntryDetail:
    """An entry, the entries it links to, and any one-way links touching it."""
    entry: Entry
    related: tuple[Entry, ...]
    asymmetric: tuple[AsymmetricRelationWarning, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON output."""
        return {
            **self.entry.to_dict(),
            "related_entries": [
                {"id": e.id, "title": e.title, "category": e.category.value}
                for e in self.related
            ],
            "asymmetric_relations": [str(w) for w in self.asymmetric],
        }


class DescribeEntryUseCase:
    """Resolve an id into an EntryDetail. Unknown ids raise NotFoundError."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def execute(self, entry_id: str) -> EntryDetail:
        entry = self.catalog.find_by_id(entry_id)
        related = tuple(self.catalog.related(entry_id))
        warnings = self.catalog.report.warnings if self.catalog.report else ()
        asymmetric = tuple(
            w for w in warnings
            if isinstance(w, AsymmetricRelationWarning)
            and entry_id in (w.referrer, w.target)
        )
        return EntryDetail(entry=entry, related=related, asymmetric=asymmetric)
