from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from pattern_catalog.domain.errors import (
    CatalogSourceError,
    CatalogValidationError,
)


class Category(Enum):
    """Kind of catalog entry."""
    PATTERN = "pattern"
    SMELL = "smell"

    @classmethod
    def parse(cls, raw: object) -> "Category":
        """Parse 'pattern' / 'Smell' / Category.SMELL into a Category."""
        if isinstance(raw, Category):
            return raw
        value = str(raw).strip().lower()
        for member in cls:
            if member.value == value:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown category {raw!r} (expected one of: {allowed})")


class CatalogState(Enum):
    """Lifecycle of a Catalog. READY is terminal."""
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class Example:
    """Before/after illustration. Text is an opaque payload, never executed."""
    before: str
    after: str
    language: str = "python"

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"before": self.before, "after": self.after, "language": self.language}


@dataclass(frozen=True)
class Entry:
    """A single pattern or smell record."""
    id: str
    category: Category
    title: str
    summary: str
    related_ids: frozenset[str] = field(default_factory=frozenset)
    example: Example | None = None
    when_to_use: str = ""
    references: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, record: Mapping[str, object]) -> "Entry":
        """
        Build an Entry from a plain mapping (YAML/JSON record).

        Missing text fields become empty strings so the validator can report
        them together; only structurally unusable records raise here.
        """
        if not isinstance(record, Mapping):
            raise CatalogSourceError(f"entry record must be a mapping, got {type(record).__name__}")
        entry_id = str(record.get("id") or "")
        try:
            category = Category.parse(record.get("category", ""))
        except ValueError as e:
            raise CatalogSourceError(f"entry {entry_id!r}: {e}") from e

        raw_related = record.get("related", record.get("related_ids", [])) or []
        if isinstance(raw_related, str) or not isinstance(raw_related, Iterable):
            raise CatalogSourceError(f"entry {entry_id!r}: 'related' must be a list of ids")

        example: Example | None = None
        raw_example = record.get("example")
        if raw_example is not None:
            if not isinstance(raw_example, Mapping):
                raise CatalogSourceError(f"entry {entry_id!r}: 'example' must be a mapping")
            example = Example(
                before=str(raw_example.get("before") or ""),
                after=str(raw_example.get("after") or ""),
                language=str(raw_example.get("language") or "python"),
            )

        raw_refs = record.get("references", []) or []
        if isinstance(raw_refs, str):
            raw_refs = [raw_refs]

        return cls(
            id=entry_id,
            category=category,
            title=str(record.get("title") or ""),
            summary=str(record.get("summary") or ""),
            related_ids=frozenset(str(r) for r in raw_related),
            example=example,
            when_to_use=str(record.get("when_to_use") or ""),
            references=tuple(str(r) for r in raw_refs),
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization. Related ids are sorted."""
        out: dict[str, object] = {
            "id": self.id,
            "category": self.category.value,
            "title": self.title,
            "summary": self.summary,
            "related": sorted(self.related_ids),
        }
        if self.example is not None:
            out["example"] = self.example.to_dict()
        if self.when_to_use:
            out["when_to_use"] = self.when_to_use
        if self.references:
            out["references"] = list(self.references)
        return out


@dataclass(frozen=True)
class ValidationReport:
    """
    Combined validator output.

    Errors are fatal to ``finalize()``; warnings are informational only.
    """
    errors: tuple[CatalogValidationError, ...] = ()
    warnings: tuple[UserWarning, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when the catalog is usable (no errors)."""
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.is_valid,
            "errors": [
                {"type": type(e).__name__, "message": str(e)} for e in self.errors
            ],
            "warnings": [
                {"type": type(w).__name__, "message": str(w)} for w in self.warnings
            ],
        }
