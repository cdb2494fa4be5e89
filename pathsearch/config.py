"""Configuration model and loaders for pathsearch.

Responsibilities:
- Define lookup configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `LookupConfig`: normalized settings for lookups issued by the CLI.
- `ConfigLoader`: static construction helpers for `LookupConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_switch


_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(slots=True)
class LookupConfig:
    """Settings for executable lookups.

    Attributes:
        throw_if_not_found: Whether version lookups fail when nothing is found.
        log_level: Minimum loguru level for lookup event logs.
    """

    throw_if_not_found: bool = False
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.log_level.upper() not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )


class ConfigLoader:
    """Factory methods for creating `LookupConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"throw_if_not_found", "log_level"})
    ENV_THROW_IF_NOT_FOUND = "PATHSEARCH_THROW_IF_NOT_FOUND"
    ENV_LOG_LEVEL = "PATHSEARCH_LOG_LEVEL"

    @staticmethod
    def from_yaml(path: Path, base: LookupConfig | None = None) -> LookupConfig:
        """Create a validated config from a YAML file.

        Keys the file leaves unset keep their value from `base` (defaults when omitted).
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", base=base
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> LookupConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        config = LookupConfig()
        throw_value = normalize_optional_string(env_map.get(ConfigLoader.ENV_THROW_IF_NOT_FOUND))
        if throw_value is not None:
            config.throw_if_not_found = parse_switch(
                throw_value, ConfigLoader.ENV_THROW_IF_NOT_FOUND
            )
        level_value = normalize_optional_string(env_map.get(ConfigLoader.ENV_LOG_LEVEL))
        if level_value is not None:
            config.log_level = level_value.upper()
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: LookupConfig | None = None,
    ) -> LookupConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown_keys:
            raise ValueError(
                f"{source_label} has unsupported key(s): {', '.join(unknown_keys)}."
            )

        config = LookupConfig() if base is None else replace(base)
        if payload.get("throw_if_not_found") is not None:
            config.throw_if_not_found = parse_switch(
                payload["throw_if_not_found"], "throw_if_not_found"
            )
        level_value = normalize_optional_string(payload.get("log_level"))
        if level_value is not None:
            config.log_level = level_value.upper()
        config.validate()
        return config
