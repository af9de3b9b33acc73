"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the path so the tests never pick up another installed copy.
"""

from collections.abc import Callable, Iterable

import pytest

from pattern_catalog.domain.entities import Category, Entry, Example


def build_entry(
    entry_id: str,
    category: Category = Category.PATTERN,
    related: Iterable[str] = (),
    title: str | None = None,
    summary: str | None = None,
    example: Example | None = None,
) -> Entry:
    """Entry with readable defaults derived from the id."""
    return Entry(
        id=entry_id,
        category=category,
        title=entry_id.replace("-", " ").title() if title is None else title,
        summary=f"Summary of {entry_id}." if summary is None else summary,
        related_ids=frozenset(related),
        example=example,
    )


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    return build_entry


@pytest.fixture
def write_catalog(tmp_path):
    """Write a YAML catalog file under tmp_path and return its path as str."""

    def _write(content: str, name: str = "catalog.yaml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
