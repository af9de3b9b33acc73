"""YAML content source: reads catalog entry records from a YAML document."""

from pathlib import Path

import yaml

from pattern_catalog.domain.constants import BUILTIN_CATALOG_RESOURCE
from pattern_catalog.domain.entities import Entry
from pattern_catalog.domain.errors import CatalogSourceError
from pattern_catalog.domain.protocols import ContentSourceProtocol, FileSystemProtocol


class YamlContentSource(ContentSourceProtocol):
    """
    Loads entries from a YAML file with a top-level ``entries:`` list.

    A list (not a mapping keyed by id) keeps duplicate ids visible so the
    store can reject them instead of YAML silently keeping the last one.
    """

    def __init__(self, path: str, filesystem: FileSystemProtocol, name: str | None = None) -> None:
        self._path = path
        self._fs = filesystem
        self._name = name or path

    @classmethod
    def builtin(cls, filesystem: FileSystemProtocol) -> "YamlContentSource":
        """Source for the catalog packaged with pattern_catalog."""
        base = Path(__file__).resolve().parent.parent.parent
        return cls(str(base / BUILTIN_CATALOG_RESOURCE), filesystem, name="builtin")

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> list[Entry]:
        if not self._fs.exists(self._path):
            raise CatalogSourceError(f"{self._name}: file not found: {self._path}")
        try:
            data = yaml.safe_load(self._fs.read_text(self._path))
        except OSError as e:
            raise CatalogSourceError(f"{self._name}: cannot read {self._path}: {e}") from e
        except yaml.YAMLError as e:
            raise CatalogSourceError(f"{self._name}: invalid YAML: {e}") from e

        if data is None:
            return []
        if not isinstance(data, dict) or not isinstance(data.get("entries", []), list):
            raise CatalogSourceError(
                f"{self._name}: expected a mapping with an 'entries' list")

        entries: list[Entry] = []
        for position, record in enumerate(data.get("entries") or [], start=1):
            try:
                entries.append(Entry.from_dict(record))
            except CatalogSourceError as e:
                raise CatalogSourceError(f"{self._name}: record #{position}: {e}") from e
        return entries
