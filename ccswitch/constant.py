# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CCSWITCH_WORKING_DIR", "~/.cc"))
    .expanduser()
    .resolve()
)

PROVIDERS_FILE = os.environ.get("CCSWITCH_PROVIDERS_FILE", "providers.json")

# Live settings consumed by Claude Code itself.
CLAUDE_CONFIG_DIR = (
    Path(os.environ.get("CLAUDE_CONFIG_DIR", "~/.claude"))
    .expanduser()
    .resolve()
)

CLAUDE_SETTINGS_FILE = os.environ.get(
    "CLAUDE_SETTINGS_FILE",
    "settings.json",
)

CLAUDE_SETTINGS_SCHEMA_URL = (
    "https://json.schemastore.org/claude-code-settings.json"
)

# Env keys inside settings.json["env"] that identify a provider.
AUTH_TOKEN_ENV_KEY = "ANTHROPIC_AUTH_TOKEN"
BASE_URL_ENV_KEY = "ANTHROPIC_BASE_URL"

# Auth tokens with this prefix are API keys; anything else is treated
# as a subscription login.
API_KEY_PREFIX = "sk-ant-"

# Env key for log level (used by the CLI).
LOG_LEVEL_ENV = "CCSWITCH_LOG_LEVEL"


def get_providers_json_path() -> Path:
    """Return the default providers.json path."""
    return WORKING_DIR / PROVIDERS_FILE


def get_claude_settings_path() -> Path:
    """Return the default path of Claude Code's live settings.json."""
    return CLAUDE_CONFIG_DIR / CLAUDE_SETTINGS_FILE
