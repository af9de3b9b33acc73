"""Catalog error taxonomy. Pure domain, no I/O."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import ValidationReport


class CatalogError(Exception):
    """Base class for every error raised by the catalog."""


class DuplicateIdError(CatalogError):
    """An entry with the same id is already in the store."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"duplicate entry id: {entry_id}")
        self.entry_id = entry_id


class NotFoundError(CatalogError, KeyError):
    """Lookup for an id that is not in the catalog."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the id
        return f"no such entry: {self.entry_id}"


class CatalogStateError(CatalogError):
    """Operation not allowed in the catalog's current lifecycle state."""


class CatalogSourceError(CatalogError):
    """A content source could not be read or holds malformed records."""


class CatalogValidationError(CatalogError):
    """
    Base of the fatal validation errors.

    ``report`` is attached by ``Catalog.finalize()`` so callers can list every
    problem found, not only the one raised.
    """

    report: ValidationReport | None = None


class SchemaError(CatalogValidationError):
    """One or more entries are missing required fields or are malformed."""

    def __init__(self, entry_ids: tuple[str, ...], details: tuple[str, ...] = ()) -> None:
        listed = ", ".join(repr(i) for i in entry_ids)
        message = f"schema violations in entries: {listed}"
        if details:
            message += " (" + "; ".join(details) + ")"
        super().__init__(message)
        self.entry_ids = entry_ids
        self.details = details


class DanglingReferenceError(CatalogValidationError):
    """A related id does not resolve to any entry."""

    def __init__(self, referrer: str, missing_id: str) -> None:
        super().__init__(
            f"entry {referrer!r} relates to unknown entry {missing_id!r}")
        self.referrer = referrer
        self.missing_id = missing_id


class AsymmetricRelationWarning(UserWarning):
    """``referrer`` lists ``target`` as related but not the other way round."""

    def __init__(self, referrer: str, target: str) -> None:
        super().__init__(
            f"relation {referrer!r} -> {target!r} is not mirrored by {target!r}")
        self.referrer = referrer
        self.target = target


class DuplicateContentWarning(UserWarning):
    """Two entries of the same category read as near-duplicates."""

    def __init__(self, first_id: str, second_id: str, ratio: float) -> None:
        super().__init__(
            f"entries {first_id!r} and {second_id!r} look like duplicates "
            f"(similarity {ratio:.2f})"
        )
        self.first_id = first_id
        self.second_id = second_id
        self.ratio = ratio
