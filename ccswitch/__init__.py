# -*- coding: utf-8 -*-
"""Switch Claude Code between saved API providers."""

from .exceptions import CCSwitchError, ProviderNotFoundError, StoreParseError
from .live import LiveSettings, LiveSettingsStore
from .providers import Provider, ProviderStore, ProviderSwitcher, ProvidersConfig

__version__ = "0.1.0"

__all__ = [
    "CCSwitchError",
    "LiveSettings",
    "LiveSettingsStore",
    "Provider",
    "ProviderNotFoundError",
    "ProviderStore",
    "ProviderSwitcher",
    "ProvidersConfig",
    "StoreParseError",
]
