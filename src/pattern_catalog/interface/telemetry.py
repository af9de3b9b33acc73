"""Project telemetry: status lines on stderr so stdout stays clean for --format json."""

from rich.console import Console
from rich.markup import escape

from pattern_catalog.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Rich-backed implementation of TelemetryPort."""

    def __init__(
        self,
        project_name: str,
        color: str,
        welcome: str,
        console: Console | None = None,
        quiet: bool = False,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = console or Console(stderr=True)
        self.quiet = quiet

    def handshake(self) -> None:
        if self.quiet:
            return
        tag = escape(f"[{self.project_name}]")
        self.console.print(
            f"[bold {self.color}]{tag}[/] {escape(self.welcome)}", highlight=False)

    def step(self, message: str) -> None:
        if self.quiet or not message:
            return
        self.console.print(f"[{self.color}]»[/] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARNING[/] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/] {escape(message)}", highlight=False)
