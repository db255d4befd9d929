"""
Settings loaded from nfa2dfa.toml.

Every key is optional; a missing file means defaults. Precedence:
    defaults -> TOML file -> command-line overrides (applied by the CLI)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

import toml

from .errors import ConfigError

l = logging.getLogger(name=__name__)

DEFAULT_CONFIG_FILE = "nfa2dfa.toml"


@dataclass(frozen=True)
class OutputSettings:
    path: str = "converted_dfa.dfa"


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def with_output_path(self, path: Optional[str]) -> Settings:
        if path is None:
            return self
        return replace(self, output=replace(self.output, path=path))


def _section(cfg: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(value).__name__}")
    return value


def _str_value(section: Mapping[str, Any], section_name: str, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{section_name}.{key} must be a non-empty string, got {value!r}")
    return value


def settings_from_mapping(cfg: Mapping[str, Any]) -> Settings:
    out = _section(cfg, "output")
    log = _section(cfg, "logging")

    level = _str_value(log, "logging", "level", LoggingSettings.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"logging.level {level!r} is not a known logging level")

    return Settings(
        output=OutputSettings(path=_str_value(out, "output", "path", OutputSettings.path)),
        logging=LoggingSettings(
            level=level,
            format=_str_value(log, "logging", "format", LoggingSettings.format),
        ),
    )


def load_settings(path: Optional[str] = None) -> Settings:
    # An explicit path must exist; the default file is optional.
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_FILE):
            return Settings()
        path = DEFAULT_CONFIG_FILE
    elif not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        cfg = toml.load(path)
    except toml.TomlDecodeError as ex:
        raise ConfigError(f"Invalid TOML in {path}: {ex}") from ex

    settings = settings_from_mapping(cfg)
    l.debug("Loaded settings from %s: %s", path, settings)
    return settings
