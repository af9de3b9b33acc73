"""Use Case: Load content sources into a Catalog and finalize it."""

import logging
from collections.abc import Sequence

from pattern_catalog.domain.catalog import Catalog
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.domain.duplicates import DuplicateContentDetector
from pattern_catalog.domain.errors import DuplicateIdError
from pattern_catalog.domain.protocols import ContentSourceProtocol, TelemetryPort
from pattern_catalog.domain.validator import CatalogValidator


class LoadCatalogUseCase:
    """
    Orchestrate the Loading phase: read every source in order, put each entry,
    then finalize.

    Duplicate ids follow ``config_loader.on_duplicate``: 'abort' re-raises the
    DuplicateIdError, 'skip' keeps the first entry and warns. Validation errors
    propagate from ``finalize()`` unchanged.
    """

    def __init__(
        self,
        sources: Sequence[ContentSourceProtocol],
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
    ) -> None:
        self.sources = sources
        self.telemetry = telemetry
        self.config_loader = config_loader

    def build_validator(self) -> CatalogValidator:
        detector = None
        if self.config_loader.detect_duplicate_content:
            detector = DuplicateContentDetector(
                self.config_loader.duplicate_similarity_threshold)
        return CatalogValidator(duplicate_detector=detector)

    def execute(self) -> Catalog:
        catalog = Catalog(validator=self.build_validator())
        skip_duplicates = self.config_loader.on_duplicate == "skip"

        for source in self.sources:
            entries = source.load()
            self.telemetry.step(f"Loading {len(entries)} entries from {source.name}")
            for entry in entries:
                try:
                    catalog.put(entry)
                except DuplicateIdError:
                    if not skip_duplicates:
                        raise
                    logging.warning(
                        "Skipping duplicate entry %r from %s", entry.id, source.name)
                    self.telemetry.warning(
                        f"Skipped duplicate entry '{entry.id}' from {source.name}")

        report = catalog.finalize()
        self.telemetry.step(
            f"Catalog ready: {len(catalog)} entries, {len(report.warnings)} warning(s)")
        return catalog
