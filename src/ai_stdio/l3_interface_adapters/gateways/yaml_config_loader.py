"""Gateway: YAML configuration loader with defaults merging and `$ENV:` expansion."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from ai_stdio.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

ENV_PREFIX = '$ENV:'


class YamlConfigLoader:
    """Reads the user YAML config; validation and defaults are applied by the caller."""

    def load_raw(self, config_path: str | None = None) -> dict:
        """Return the YAML data as a raw dict (before Pydantic validation).

        With no explicit path the first existing default config file is used;
        none at all gives an empty dict.
        """
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return yaml.safe_load(path.read_text(encoding='utf-8')) or {}
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
        return {}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def expand_env_value(value: str) -> str:
    """Resolve ``$ENV:NAME`` to the environment variable NAME (empty if unset); other values pass through."""
    if value.startswith(ENV_PREFIX):
        return os.environ.get(value[len(ENV_PREFIX) :], '')
    return value
