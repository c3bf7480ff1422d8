"""Shared path constants for configuration, logs and conversation documents."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('ai-stdio')
LOG_DIR = user_log_path('ai-stdio')

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]

CONVERSATION_FILENAME = '.ai-stdio.md'
PROMPT_FILENAME = '.prompt'
