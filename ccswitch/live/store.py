# -*- coding: utf-8 -*-
"""Reading and writing Claude Code's live settings.json."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..constant import get_claude_settings_path
from ..exceptions import StoreParseError
from ..utils import atomic_write_text, dump_json, read_json_file
from .models import LiveSettings

logger = logging.getLogger(__name__)


class LiveSettingsStore:
    """The settings file Claude Code actually reads.

    Nothing is cached: the file may be edited by hand (or by Claude Code)
    between two calls, so every call goes back to disk.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        if path is None:
            path = get_claude_settings_path()
        self._path = Path(path).expanduser().resolve()

    def path(self) -> Path:
        """Return the resolved settings.json path."""
        return self._path

    def load(self) -> Optional[LiveSettings]:
        """Return the live settings, or ``None`` if the file does not exist."""
        raw = read_json_file(self._path)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise StoreParseError(self._path, "root is not a JSON object")
        try:
            return LiveSettings.model_validate(raw)
        except ValidationError as e:
            raise StoreParseError(self._path, str(e)) from e

    def save(self, settings: Union[LiveSettings, Dict[str, Any]]) -> None:
        """Overwrite the live settings file atomically."""
        if not isinstance(settings, LiveSettings):
            settings = LiveSettings.model_validate(settings)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write_text(self._path, dump_json(settings.to_dict()))
        logger.debug("Saved live settings to %s", self._path)
