"""Interface for catalog reporting."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Entry, ValidationReport
    from pattern_catalog.use_cases.describe_entry import EntryDetail


class CatalogReporter(Protocol):
    """Protocol for rendering catalog query results to the user."""

    def report_entries(self, entries: Sequence["Entry"], title: str) -> None:
        """Render a list of entries."""
        ...

    def report_entry(self, detail: "EntryDetail") -> None:
        """Render a single entry with its example and related entries."""
        ...

    def report_validation(self, report: "ValidationReport") -> None:
        """Render a validation report (errors first, then warnings)."""
        ...
