"""Configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from ai_stdio.l1_entities.config import AppConfig
from ai_stdio.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'llm': {
        'default_provider': 'ollama',
        'providers': {
            'ollama': {
                'type': 'ollama',
                'model': 'llama3.2',
                'params': {'base_url': 'http://localhost:11434'},
            },
        },
        'glob_ignore': [],
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
