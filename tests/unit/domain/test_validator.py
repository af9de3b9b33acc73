"""Unit tests for CatalogValidator passes."""

import unittest

from pattern_catalog.domain.duplicates import DuplicateContentDetector
from pattern_catalog.domain.entities import Category, Entry
from pattern_catalog.domain.errors import (
    AsymmetricRelationWarning,
    DanglingReferenceError,
    DuplicateContentWarning,
    SchemaError,
)
from pattern_catalog.domain.relations import RelationshipIndex
from pattern_catalog.domain.store import EntryStore
from pattern_catalog.domain.validator import CatalogValidator


def _entry(entry_id: str, related: tuple[str, ...] = (), title: str = "Title",
           summary: str = "Summary.", category: Category = Category.PATTERN) -> Entry:
    return Entry(id=entry_id, category=category, title=title, summary=summary,
                 related_ids=frozenset(related))


class TestCatalogValidator(unittest.TestCase):
    """Test the schema, referential, symmetry and duplicate passes."""

    def setUp(self) -> None:
        self.store = EntryStore()
        self.validator = CatalogValidator()

    def _validate(self):
        return self.validator.validate(self.store, RelationshipIndex(self.store))

    def test_clean_catalog_has_no_errors_or_warnings(self) -> None:
        self.store.put(_entry("builder", ("factory",)))
        self.store.put(_entry("factory", ("builder",)))
        report = self._validate()
        self.assertTrue(report.is_valid)
        self.assertEqual(report.errors, ())
        self.assertEqual(report.warnings, ())

    def test_schema_error_lists_every_offending_id(self) -> None:
        self.store.put(_entry("no-title", title=""))
        self.store.put(_entry("ok"))
        self.store.put(_entry("blank-summary", summary="   "))
        report = self._validate()
        self.assertEqual(len(report.errors), 1)
        error = report.errors[0]
        self.assertIsInstance(error, SchemaError)
        self.assertEqual(error.entry_ids, ("no-title", "blank-summary"))
        self.assertIn("empty title", str(error))
        self.assertIn("empty summary", str(error))

    def test_empty_id_is_a_schema_error(self) -> None:
        self.store.put(_entry(""))
        report = self._validate()
        self.assertIsInstance(report.errors[0], SchemaError)
        self.assertIn("empty id", str(report.errors[0]))

    def test_non_slug_id_is_a_schema_error(self) -> None:
        self.store.put(_entry("Feature Envy"))
        report = self._validate()
        self.assertIsInstance(report.errors[0], SchemaError)
        self.assertIn("slug", str(report.errors[0]))

    def test_self_relation_is_a_schema_error(self) -> None:
        self.store.put(_entry("builder", ("builder",)))
        report = self._validate()
        self.assertEqual(len(report.errors), 1)
        self.assertIsInstance(report.errors[0], SchemaError)
        self.assertIn("relates to itself", str(report.errors[0]))
        self.assertEqual(report.warnings, ())

    def test_dangling_reference_names_missing_id_and_referrer(self) -> None:
        self.store.put(_entry("feature-envy", ("tell-dont-ask",), category=Category.SMELL))
        report = self._validate()
        self.assertEqual(len(report.errors), 1)
        error = report.errors[0]
        self.assertIsInstance(error, DanglingReferenceError)
        self.assertEqual(error.referrer, "feature-envy")
        self.assertEqual(error.missing_id, "tell-dont-ask")

    def test_one_error_per_dangling_reference(self) -> None:
        self.store.put(_entry("a", ("x", "y")))
        self.store.put(_entry("b", ("x",)))
        report = self._validate()
        pairs = [(e.referrer, e.missing_id) for e in report.errors]
        self.assertEqual(pairs, [("a", "x"), ("a", "y"), ("b", "x")])

    def test_schema_errors_come_before_reference_errors(self) -> None:
        self.store.put(_entry("a", ("missing",)))
        self.store.put(_entry("b", title=""))
        report = self._validate()
        self.assertIsInstance(report.errors[0], SchemaError)
        self.assertIsInstance(report.errors[1], DanglingReferenceError)

    def test_asymmetric_relation_is_exactly_one_warning(self) -> None:
        self.store.put(_entry("a", ("b",)))
        self.store.put(_entry("b"))
        report = self._validate()
        self.assertTrue(report.is_valid)
        self.assertEqual(len(report.warnings), 1)
        warning = report.warnings[0]
        self.assertIsInstance(warning, AsymmetricRelationWarning)
        self.assertEqual((warning.referrer, warning.target), ("a", "b"))

    def test_dangling_target_is_not_also_an_asymmetry_warning(self) -> None:
        self.store.put(_entry("a", ("ghost",)))
        report = self._validate()
        self.assertEqual(report.warnings, ())

    def test_duplicate_pass_runs_only_with_detector(self) -> None:
        self.store.put(_entry("factory", title="Factory", summary="Creates objects for callers."))
        self.store.put(_entry("factory-v2", title="Factory", summary="Creates objects for callers!"))
        self.assertEqual(self._validate().warnings, ())

        self.validator = CatalogValidator(duplicate_detector=DuplicateContentDetector(0.9))
        warnings = self._validate().warnings
        self.assertEqual(len(warnings), 1)
        self.assertIsInstance(warnings[0], DuplicateContentWarning)
        self.assertEqual((warnings[0].first_id, warnings[0].second_id), ("factory", "factory-v2"))
