"""Use Case: Export a Ready catalog as a JSON document."""

import json

from pattern_catalog.domain.catalog import Catalog
from pattern_catalog.domain.protocols import FileSystemProtocol, TelemetryPort


class ExportCatalogUseCase:
    """Serialize every entry (catalog order) plus the validation report."""

    def __init__(self, catalog: Catalog, filesystem: FileSystemProtocol, telemetry: TelemetryPort) -> None:
        self.catalog = catalog
        self.filesystem = filesystem
        self.telemetry = telemetry

    def render(self) -> str:
        report = self.catalog.report
        document = {
            "entries": [entry.to_dict() for entry in self.catalog.all()],
            "report": report.to_dict() if report else None,
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    def execute(self, output_path: str) -> str:
        """Write the export and return the resolved output path."""
        content = self.render()
        self.filesystem.write_text(output_path, content)
        resolved = self.filesystem.resolve_path(output_path)
        self.telemetry.step(f"Exported {len(self.catalog)} entries to {resolved}")
        return resolved
