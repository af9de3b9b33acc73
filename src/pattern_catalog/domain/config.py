"""Configuration for catalog loading. Immutable value object created by Infrastructure."""

import logging

from pattern_catalog.domain.constants import (
    BOOLEAN_DEFAULTS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SIMILARITY_THRESHOLD,
    LOG_LEVELS,
    ON_DUPLICATE_CHOICES,
)


class ConfigurationLoader:
    """
    Immutable catalog settings.

    Created by Infrastructure from the [tool.pattern-catalog] table. Domain does
    not read the filesystem; ConfigFileLoader.load_config_from_fs() supplies the
    dict at the composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values that will be ignored."""
        on_duplicate = config.get("on_duplicate")
        if on_duplicate is not None and on_duplicate not in ON_DUPLICATE_CHOICES:
            logging.warning(
                "Configuration Warning: 'on_duplicate' must be one of %s, got %r. Using 'abort'.",
                ", ".join(ON_DUPLICATE_CHOICES), on_duplicate)
        threshold = config.get("duplicate_similarity_threshold")
        if threshold is not None and not self._valid_threshold(threshold):
            logging.warning(
                "Configuration Warning: 'duplicate_similarity_threshold' must be in (0, 1], got %r. "
                "Using %s.", threshold, DEFAULT_SIMILARITY_THRESHOLD)
        for key, default in BOOLEAN_DEFAULTS.items():
            raw = config.get(key)
            if raw is not None and not isinstance(raw, bool):
                logging.warning(
                    "Configuration Warning: '%s' must be true or false, got %r. Using %s.",
                    key, raw, default)

    @staticmethod
    def _valid_threshold(raw: object) -> bool:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            return False
        return 0.0 < float(raw) <= 1.0

    def _flag(self, key: str) -> bool:
        raw = self._config.get(key)
        return raw if isinstance(raw, bool) else BOOLEAN_DEFAULTS[key]

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def sources(self) -> list[str]:
        """Extra YAML content files, in load order."""
        raw = self._config.get("sources", [])
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def include_builtin(self) -> bool:
        """Whether the packaged catalog is loaded before the extra sources."""
        return self._flag("include_builtin")

    @property
    def on_duplicate(self) -> str:
        """'abort' (default) stops loading on a duplicate id; 'skip' keeps the first entry."""
        raw = self._config.get("on_duplicate", "abort")
        return raw if raw in ON_DUPLICATE_CHOICES else "abort"

    @property
    def detect_duplicate_content(self) -> bool:
        return self._flag("detect_duplicate_content")

    @property
    def duplicate_similarity_threshold(self) -> float:
        raw = self._config.get("duplicate_similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD)
        if self._valid_threshold(raw):
            return float(raw)  # type: ignore[arg-type]
        return DEFAULT_SIMILARITY_THRESHOLD

    @property
    def log_level(self) -> str:
        raw = self._config.get("log_level", DEFAULT_LOG_LEVEL)
        level = str(raw).upper()
        if level not in LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level
