"""CLI entry points for the pattern catalog - Thin Controller using Typer."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Optional

import typer

from pattern_catalog.domain.catalog import Catalog
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.domain.constants import CATALOG_BANNER, OUTPUT_FORMATS
from pattern_catalog.domain.entities import Category
from pattern_catalog.domain.errors import (
    CatalogSourceError,
    CatalogValidationError,
    DuplicateIdError,
    NotFoundError,
)
from pattern_catalog.domain.protocols import (
    ContentSourceProtocol,
    FileSystemProtocol,
    TelemetryPort,
)
from pattern_catalog.interface.reporters import CatalogReporter
from pattern_catalog.use_cases.describe_entry import DescribeEntryUseCase
from pattern_catalog.use_cases.export_catalog import ExportCatalogUseCase
from pattern_catalog.use_cases.load_catalog import LoadCatalogUseCase

# B008: avoid function call in default; use module-level singletons for Typer Options
_SOURCE_OPTION = typer.Option(
    None, "--source", "-s", help="Extra YAML catalog file (repeatable)")
_FORMAT_OPTION = typer.Option(
    "terminal", "--format", "-f", help="Output format: terminal or json")

EXIT_NOT_FOUND = 1
EXIT_STARTUP_FAILURE = 2

SourceProvider = Callable[[list[str], Optional[bool]], list[ContentSourceProtocol]]


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    terminal_reporter: CatalogReporter
    json_reporter: CatalogReporter
    source_provider: SourceProvider


@dataclass
class _SessionOptions:
    """Global options collected by the Typer callback."""

    sources: list[str]
    include_builtin: Optional[bool] = None


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure_logging(level: str, verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )

    @staticmethod
    def installed_version() -> str:
        try:
            return metadata.version("pattern-catalog")
        except metadata.PackageNotFoundError:
            return "unknown (not installed)"

    @staticmethod
    def pick_reporter(deps: CLIDependencies, output_format: str) -> CatalogReporter:
        if output_format not in OUTPUT_FORMATS:
            raise typer.BadParameter(
                f"unknown format {output_format!r} (expected one of: {', '.join(OUTPUT_FORMATS)})",
                param_hint="--format",
            )
        return deps.json_reporter if output_format == "json" else deps.terminal_reporter

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="pattern-catalog",
            help="Pattern Catalog: look up design patterns and code smells, and validate catalog files.",
            add_completion=False,
            no_args_is_help=True,
        )
        session = _SessionOptions(sources=[])

        @app.callback()
        def main_options(
            source: Optional[list[Path]] = _SOURCE_OPTION,
            no_builtin: bool = typer.Option(
                False, "--no-builtin", help="Do not load the packaged catalog"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Debug logging on stderr"),
        ) -> None:
            """Options shared by every command."""
            CLIAppFactory.configure_logging(deps.config_loader.log_level, verbose)
            session.sources = [str(p) for p in source or []]
            session.include_builtin = False if no_builtin else None

        def load_catalog(reporter: CatalogReporter) -> Catalog:
            """Run the Loading phase; any failure is a startup failure (exit 2)."""
            deps.telemetry.handshake()
            sources = deps.source_provider(session.sources, session.include_builtin)
            use_case = LoadCatalogUseCase(sources, deps.telemetry, deps.config_loader)
            try:
                return use_case.execute()
            except CatalogSourceError as e:
                deps.telemetry.error(str(e))
            except DuplicateIdError as e:
                deps.telemetry.error(
                    f"{e} (set on_duplicate = \"skip\" in [tool.pattern-catalog] to keep the first)")
            except CatalogValidationError as e:
                deps.telemetry.error("Catalog failed validation; every problem found is listed below.")
                if e.report is not None:
                    reporter.report_validation(e.report)
            raise typer.Exit(EXIT_STARTUP_FAILURE)

        @app.command("list")
        def list_entries(
            category: Optional[str] = typer.Option(
                None, "--category", "-c", help="Only 'pattern' or 'smell' entries"),
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """List catalog entries in catalog order."""
            reporter = CLIAppFactory.pick_reporter(deps, output_format)
            selected: Optional[Category] = None
            if category is not None:
                try:
                    selected = Category.parse(category)
                except ValueError as e:
                    raise typer.BadParameter(str(e), param_hint="--category") from e
            catalog = load_catalog(reporter)
            if selected is None:
                reporter.report_entries(list(catalog.all()), title="All entries")
            else:
                reporter.report_entries(
                    list(catalog.by_category(selected)), title=f"{selected.value.title()} entries")

        @app.command()
        def show(
            entry_id: str = typer.Argument(..., help="Entry id, e.g. feature-envy"),
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """Show one entry with its example and related entries."""
            reporter = CLIAppFactory.pick_reporter(deps, output_format)
            catalog = load_catalog(reporter)
            try:
                detail = DescribeEntryUseCase(catalog).execute(entry_id)
            except NotFoundError as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(EXIT_NOT_FOUND) from e
            reporter.report_entry(detail)

        @app.command()
        def search(
            keyword: str = typer.Argument(..., help="Case-insensitive text to look for"),
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """Search titles and summaries; exact title matches come first."""
            reporter = CLIAppFactory.pick_reporter(deps, output_format)
            catalog = load_catalog(reporter)
            reporter.report_entries(list(catalog.search(keyword)), title=f"Search: {keyword}")

        @app.command()
        def related(
            entry_id: str = typer.Argument(..., help="Entry id"),
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """List the entries directly related to an entry."""
            reporter = CLIAppFactory.pick_reporter(deps, output_format)
            catalog = load_catalog(reporter)
            try:
                entries = catalog.related(entry_id)
            except NotFoundError as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(EXIT_NOT_FOUND) from e
            reporter.report_entries(entries, title=f"Related to {entry_id}")

        @app.command()
        def validate(output_format: str = _FORMAT_OPTION) -> None:
            """Validate the configured sources and print the full report."""
            reporter = CLIAppFactory.pick_reporter(deps, output_format)
            deps.telemetry.handshake()
            sources = deps.source_provider(session.sources, session.include_builtin)
            use_case = LoadCatalogUseCase(sources, deps.telemetry, deps.config_loader)
            try:
                catalog = use_case.execute()
            except CatalogSourceError as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(EXIT_STARTUP_FAILURE) from e
            except DuplicateIdError as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(1) from e
            except CatalogValidationError as e:
                if e.report is not None:
                    reporter.report_validation(e.report)
                else:
                    deps.telemetry.error(str(e))
                raise typer.Exit(1) from e
            if catalog.report is not None:
                reporter.report_validation(catalog.report)

        @app.command()
        def export(
            output: Path = typer.Argument(..., help="Destination JSON file"),
        ) -> None:
            """Write the validated catalog as JSON."""
            catalog = load_catalog(deps.terminal_reporter)
            ExportCatalogUseCase(catalog, deps.filesystem, deps.telemetry).execute(str(output))

        @app.command()
        def version() -> None:
            """Print the banner and the installed version."""
            typer.echo(CATALOG_BANNER)
            typer.echo(f"pattern-catalog {CLIAppFactory.installed_version()}")

        return app
