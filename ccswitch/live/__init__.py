# -*- coding: utf-8 -*-
"""Live settings: the settings.json Claude Code reads at startup."""

from .models import LiveSettings
from .store import LiveSettingsStore

__all__ = [
    "LiveSettings",
    "LiveSettingsStore",
]
