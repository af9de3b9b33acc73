from typing import TYPE_CHECKING, Any, cast

from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.infrastructure.config_file_loader import ConfigFileLoader
from pattern_catalog.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from pattern_catalog.infrastructure.gateways.yaml_content_source import YamlContentSource
from pattern_catalog.infrastructure.reporters import (
    JsonCatalogReporter,
    TerminalCatalogReporter,
)
from pattern_catalog.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from pattern_catalog.domain.protocols import (
        ContentSourceProtocol,
        FileSystemProtocol,
        TelemetryPort,
    )
    from pattern_catalog.interface.reporters import CatalogReporter


class CatalogContainer:
    """Dependency Injection Container for the pattern catalog."""

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("CATALOG", "cyan", "Pattern catalog online"))
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("TerminalCatalogReporter", TerminalCatalogReporter())
        self.register_singleton("JsonCatalogReporter", JsonCatalogReporter())

    def register_singleton(self, name: str, instance: object) -> None:
        self._singletons[name] = instance

    def get(self, name: str) -> object:
        if name not in self._singletons:
            raise ValueError(f"Dependency {name} not registered.")
        return self._singletons[name]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self, output_format: str = "terminal") -> "CatalogReporter":
        if output_format == "json":
            return cast("CatalogReporter", self.get("JsonCatalogReporter"))
        return cast("CatalogReporter", self.get("TerminalCatalogReporter"))

    def get_content_sources(
        self,
        extra_paths: list[str] | None = None,
        include_builtin: bool | None = None,
    ) -> list["ContentSourceProtocol"]:
        """Built-in catalog first (unless disabled), then configured files, then extra_paths."""
        config_loader = self.get_config_loader()
        filesystem = self.get_filesystem_gateway()
        use_builtin = config_loader.include_builtin if include_builtin is None else include_builtin
        sources: list["ContentSourceProtocol"] = []
        if use_builtin:
            sources.append(YamlContentSource.builtin(filesystem))
        for path in [*config_loader.sources, *(extra_paths or [])]:
            sources.append(YamlContentSource(path, filesystem))
        return sources
