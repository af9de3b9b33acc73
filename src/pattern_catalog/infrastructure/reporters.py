"""Terminal and JSON reporter implementations - live in infrastructure (rich / json)."""

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Entry, ValidationReport
    from pattern_catalog.use_cases.describe_entry import EntryDetail

_CATEGORY_STYLES: dict[str, str] = {
    "pattern": "bold #00EEFF",
    "smell": "bold #FFAA00",
}


class TerminalCatalogReporter:
    """Terminal reporter using rich tables and panels."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report_entries(self, entries: Sequence["Entry"], title: str) -> None:
        if not entries:
            self.console.print(f"\nNo entries for {escape(title)}.")
            return
        table = Table(title=escape(title), header_style="bold #007BFF")
        table.add_column("Id", style="#00EEFF", no_wrap=True)
        table.add_column("Category")
        table.add_column("Title", style="bold")
        table.add_column("Summary")
        for entry in entries:
            category = entry.category.value
            table.add_row(
                escape(entry.id),
                f"[{_CATEGORY_STYLES[category]}]{category}[/]",
                escape(entry.title),
                escape(entry.summary),
            )
        self.console.print(table)

    def report_entry(self, detail: "EntryDetail") -> None:
        entry = detail.entry
        category = entry.category.value
        body = [f"[{_CATEGORY_STYLES[category]}]{category}[/]  [dim]{escape(entry.id)}[/]", "",
                escape(entry.summary)]
        if entry.when_to_use:
            body += ["", f"[bold]When to use:[/] {escape(entry.when_to_use)}"]
        self.console.print(Panel("\n".join(body), title=escape(entry.title), expand=False))

        if entry.example is not None:
            language = entry.example.language
            self.console.print("[bold]Before[/]")
            self.console.print(Syntax(entry.example.before, language, word_wrap=True))
            self.console.print("[bold]After[/]")
            self.console.print(Syntax(entry.example.after, language, word_wrap=True))

        if detail.related:
            related = ", ".join(escape(e.id) for e in detail.related)
            self.console.print(f"[bold]Related:[/] {related}")
        for warning in detail.asymmetric:
            self.console.print(f"[yellow]one-way link:[/] {escape(str(warning))}")
        for reference in entry.references:
            self.console.print(f"[dim]See: {escape(reference)}[/]")

    def report_validation(self, report: "ValidationReport") -> None:
        if report.is_valid:
            self.console.print(
                f"\n✅ Catalog is valid ({len(report.warnings)} warning(s)).")
        else:
            self.console.print(
                f"\n🚫 Catalog is NOT usable: {len(report.errors)} error(s).")
            for error in report.errors:
                self.console.print(
                    f"  [bold red]{type(error).__name__}[/] {escape(str(error))}")
        for warning in report.warnings:
            self.console.print(
                f"  [yellow]{type(warning).__name__}[/] {escape(str(warning))}")


class JsonCatalogReporter:
    """Machine-readable reporter: one JSON document per call on stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def _emit(self, payload: object) -> None:
        self.console.print_json(json.dumps(payload, ensure_ascii=False))

    def report_entries(self, entries: Sequence["Entry"], title: str) -> None:
        self._emit({"title": title, "entries": [e.to_dict() for e in entries]})

    def report_entry(self, detail: "EntryDetail") -> None:
        self._emit(detail.to_dict())

    def report_validation(self, report: "ValidationReport") -> None:
        self._emit(report.to_dict())
