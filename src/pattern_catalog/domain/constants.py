"""
Pattern Catalog: shared constants
"""

_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_CATALOG_ART: str = r"""
    ____        __  __                    ______      __        __
   / __ \____ _/ /_/ /____  _________    / ____/___ _/ /_____ _/ /___  ____ _
  / /_/ / __ `/ __/ __/ _ \/ ___/ __ \  / /   / __ `/ __/ __ `/ / __ \/ __ `/
 / ____/ /_/ / /_/ /_/  __/ /  / / / / / /___/ /_/ / /_/ /_/ / / /_/ / /_/ /
/_/    \__,_/\__/\__/\___/_/  /_/ /_/  \____/\__,_/\__/\__,_/_/\____/\__, /
                                                                    /____/
"""
CATALOG_BANNER = _CYAN + _CATALOG_ART + _RESET

# pyproject.toml section read by ConfigFileLoader
TOOL_SECTION: str = "pattern-catalog"

# Packaged content, relative to the pattern_catalog package directory
BUILTIN_CATALOG_RESOURCE: str = "resources/catalog.yaml"

ON_DUPLICATE_CHOICES: tuple[str, ...] = ("abort", "skip")
BOOLEAN_DEFAULTS: dict[str, bool] = {
    "include_builtin": True,
    "detect_duplicate_content": False,
}
DEFAULT_SIMILARITY_THRESHOLD: float = 0.85
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")
