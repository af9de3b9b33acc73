"""Catalog-wide consistency checks run before the catalog becomes Ready."""

import logging
import re

from pattern_catalog.domain.duplicates import DuplicateContentDetector
from pattern_catalog.domain.entities import Entry, ValidationReport
from pattern_catalog.domain.errors import (
    AsymmetricRelationWarning,
    CatalogValidationError,
    DanglingReferenceError,
    SchemaError,
)
from pattern_catalog.domain.relations import RelationshipIndex
from pattern_catalog.domain.store import EntryStore

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CatalogValidator:
    """
    Runs the validation passes in order and collects one report.

    1. schema: required text fields, slug ids, no self-relation (fatal)
    2. referential: every related id resolves (fatal)
    3. symmetry: one-directional relations (warning)
    4. duplicate content, only when a detector is given (warning)

    Every pass runs even when an earlier one found errors, so a single report
    lists all problems.
    """

    def __init__(self, duplicate_detector: DuplicateContentDetector | None = None) -> None:
        self.duplicate_detector = duplicate_detector

    def validate(self, store: EntryStore, index: RelationshipIndex) -> ValidationReport:
        errors: list[CatalogValidationError] = []
        warnings: list[UserWarning] = []

        schema_error = self.check_schema(store)
        if schema_error is not None:
            errors.append(schema_error)
        errors.extend(self.check_references(store, index))
        warnings.extend(self.check_symmetry(store, index))
        if self.duplicate_detector is not None:
            warnings.extend(self.duplicate_detector.detect(store))

        for warning in warnings:
            logging.info("Catalog warning: %s", warning)
        return ValidationReport(errors=tuple(errors), warnings=tuple(warnings))

    def check_schema(self, store: EntryStore) -> SchemaError | None:
        offending: list[str] = []
        details: list[str] = []
        for entry in store.all():
            problems = self._schema_problems(entry)
            if problems:
                offending.append(entry.id)
                details.append(f"{entry.id or '<empty id>'}: {', '.join(problems)}")
        if not offending:
            return None
        return SchemaError(tuple(offending), tuple(details))

    @staticmethod
    def _schema_problems(entry: Entry) -> list[str]:
        problems: list[str] = []
        if not entry.id.strip():
            problems.append("empty id")
        elif not SLUG_PATTERN.match(entry.id):
            problems.append("id is not a lowercase slug")
        if not entry.title.strip():
            problems.append("empty title")
        if not entry.summary.strip():
            problems.append("empty summary")
        if entry.id in entry.related_ids:
            problems.append("relates to itself")
        return problems

    @staticmethod
    def check_references(store: EntryStore, index: RelationshipIndex) -> list[DanglingReferenceError]:
        return [
            DanglingReferenceError(referrer, target)
            for referrer, target in index.edges()
            if target not in store
        ]

    @staticmethod
    def check_symmetry(store: EntryStore, index: RelationshipIndex) -> list[AsymmetricRelationWarning]:
        found: list[AsymmetricRelationWarning] = []
        for referrer, target in index.edges():
            # self-relations and dangling targets are reported by the fatal passes
            if target == referrer or target not in store:
                continue
            if referrer not in index.related_to(target):
                found.append(AsymmetricRelationWarning(referrer, target))
        return found
