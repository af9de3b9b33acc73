"""Load [tool.pattern-catalog] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

from pattern_catalog.domain.constants import TOOL_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from start_dir.
    """

    @staticmethod
    def load_config_from_fs(start_dir: Path | None = None) -> dict[str, object]:
        """Return the [tool.pattern-catalog] table, or {} when there is none."""
        current_path = (start_dir or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = toml_lib.load(f)
                    tool_table = data.get("tool", {}) or {}
                    return tool_table.get(TOOL_SECTION, {}) or {}
                except OSError:
                    pass
            if current_path.parent == current_path:
                break
            current_path = current_path.parent
        return {}
