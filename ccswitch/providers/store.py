# -*- coding: utf-8 -*-
"""Reading and writing provider configuration (providers.json)."""

from __future__ import annotations

import logging
import secrets
import string
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..constant import get_providers_json_path
from ..exceptions import StoreParseError
from ..live.models import LiveSettings
from ..utils import atomic_write_text, dump_json, read_json_file
from .models import Provider, ProviderCategory, ProvidersConfig

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LEN = 7


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_provider_id() -> str:
    """Return ``<epoch ms>-<7 random base36 chars>``."""
    suffix = "".join(
        secrets.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LEN)
    )
    return f"{_now_ms()}-{suffix}"


class ProviderStore:
    """CRUD over providers.json.

    Every mutator follows load -> modify -> save, so the file on disk is
    always the source of truth.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        if path is None:
            path = get_providers_json_path()
        self._path = Path(path).expanduser().resolve()

    def path(self) -> Path:
        """Return the resolved providers.json path."""
        return self._path

    # ------------------------------------------------------------------
    # Load / Save
    # ------------------------------------------------------------------

    def load(self) -> ProvidersConfig:
        """Load providers.json; a missing file yields an empty config.

        The file itself is not created here, only its directory.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)

        raw = read_json_file(self._path)
        if raw is None:
            return ProvidersConfig()
        if not isinstance(raw, dict):
            raise StoreParseError(self._path, "root is not a JSON object")
        try:
            config = ProvidersConfig.model_validate(raw)
        except ValidationError as e:
            raise StoreParseError(self._path, str(e)) from e

        if config.has_dangling_current:
            logger.warning(
                "currentProviderId %s in %s matches no provider",
                config.current_provider_id,
                self._path,
            )
        return config

    def save(self, config: ProvidersConfig) -> None:
        """Write providers.json atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write_text(self._path, dump_json(config.to_dict()))

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add(
        self,
        name: str,
        settings_config: Union[LiveSettings, Dict[str, Any]],
        *,
        description: Optional[str] = None,
        category: Optional[ProviderCategory] = None,
        icon: Optional[str] = None,
        icon_color: Optional[str] = None,
    ) -> Provider:
        """Append a new provider and return it with its generated fields."""
        config = self.load()

        provider_id = generate_provider_id()
        while config.find(provider_id) is not None:
            provider_id = generate_provider_id()

        provider = Provider(
            id=provider_id,
            name=name,
            settings_config=settings_config,
            description=description,
            category=category,
            created_at=_now_ms(),
            icon=icon,
            icon_color=icon_color,
        )
        config.providers.append(provider)
        self.save(config)
        logger.info("Added provider %s (%s)", name, provider_id)
        return provider

    def update(
        self,
        provider_id: str,
        *,
        name: Optional[str] = None,
        settings_config: Optional[Union[LiveSettings, Dict[str, Any]]] = None,
        description: Optional[str] = None,
        category: Optional[ProviderCategory] = None,
        icon: Optional[str] = None,
        icon_color: Optional[str] = None,
    ) -> bool:
        """Partially update a provider; ``None`` leaves a field unchanged.

        Returns False (and writes nothing) if *provider_id* is unknown.
        """
        config = self.load()
        provider = config.find(provider_id)
        if provider is None:
            return False

        if name is not None:
            provider.name = name
        if settings_config is not None:
            if not isinstance(settings_config, LiveSettings):
                settings_config = LiveSettings.model_validate(settings_config)
            provider.settings_config = settings_config
        if description is not None:
            provider.description = description
        if category is not None:
            provider.category = category
        if icon is not None:
            provider.icon = icon
        if icon_color is not None:
            provider.icon_color = icon_color

        self.save(config)
        return True

    def remove(self, provider_id: str) -> bool:
        """Delete a provider; clears the current pointer if it was current."""
        config = self.load()
        remaining = [p for p in config.providers if p.id != provider_id]
        if len(remaining) == len(config.providers):
            return False

        config.providers = remaining
        if config.current_provider_id == provider_id:
            config.current_provider_id = None
        self.save(config)
        logger.info("Removed provider %s", provider_id)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, provider_id: str) -> Optional[Provider]:
        return self.load().find(provider_id)

    def get_by_name(self, name: str) -> Optional[Provider]:
        """Return the first provider called *name*, in insertion order."""
        for provider in self.load().providers:
            if provider.name == name:
                return provider
        return None

    def get_current(self) -> Optional[Provider]:
        return self.load().current()

    def resolve(self, ref: str) -> Optional[Provider]:
        """Look *ref* up as an id first, then as a name."""
        config = self.load()
        provider = config.find(ref)
        if provider is not None:
            return provider
        for provider in config.providers:
            if provider.name == ref:
                return provider
        return None


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
