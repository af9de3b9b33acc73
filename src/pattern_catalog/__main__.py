"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from pattern_catalog.infrastructure.di.container import CatalogContainer
from pattern_catalog.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = CatalogContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        terminal_reporter=container.get_reporter("terminal"),
        json_reporter=container.get_reporter("json"),
        source_provider=container.get_content_sources,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
