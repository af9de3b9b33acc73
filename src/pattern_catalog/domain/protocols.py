from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Entry


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class ContentSourceProtocol(Protocol):
    """Supplies raw catalog entries during the Loading phase."""

    @property
    def name(self) -> str:
        """Human-readable origin (file path, 'builtin', ...)."""
        ...

    def load(self) -> list["Entry"]:
        """Return every entry record of this source, in file order."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def exists(self, path: str) -> bool:
        """Check if a file or directory exists."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content of a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, creating parent directories."""
        ...
