# -*- coding: utf-8 -*-
"""Switching the active provider.

Switching is backfill -> persist pointer -> write live settings:

1. Whatever is in the live settings.json right now belongs to the
   outgoing provider (the user may have edited it by hand), so it is
   copied back into that provider's snapshot first.
2. providers.json is saved with the new ``currentProviderId`` before the
   live file is touched. If that save fails the live file still matches
   the old current provider.
3. The target provider's snapshot becomes the live settings.json.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import ProviderNotFoundError
from ..live.store import LiveSettingsStore
from .models import Provider, ProviderCategory, ProvidersConfig
from .store import ProviderStore

logger = logging.getLogger(__name__)


class ProviderSwitcher:
    """Coordinates the provider store and the live settings store."""

    def __init__(
        self,
        provider_store: Optional[ProviderStore] = None,
        live_store: Optional[LiveSettingsStore] = None,
    ) -> None:
        self.provider_store = provider_store or ProviderStore()
        self.live_store = live_store or LiveSettingsStore()

    def _backfill_current(self, config: ProvidersConfig) -> None:
        """Copy the live settings into the current provider's snapshot."""
        current = config.current()
        if current is None:
            return
        live = self.live_store.load()
        if live is None:
            logger.debug(
                "No live settings at %s, skipping backfill",
                self.live_store.path(),
            )
            return
        current.settings_config = live
        logger.debug("Backfilled live settings into %s", current.name)

    def switch_to(self, provider_id: str) -> Provider:
        """Make *provider_id* the active provider and return it.

        Raises:
            ProviderNotFoundError: no stored provider has that id. Nothing
                is written in that case.
        """
        config = self.provider_store.load()

        target = config.find(provider_id)
        if target is None:
            raise ProviderNotFoundError(provider_id)

        if (
            config.current_provider_id
            and config.current_provider_id != provider_id
        ):
            self._backfill_current(config)

        config.current_provider_id = provider_id
        self.provider_store.save(config)

        self.live_store.save(target.settings_config)

        logger.info("Switched to provider %s (%s)", target.name, target.id)
        return target

    def capture_current_as_provider(
        self,
        name: str,
        description: Optional[str] = None,
        category: Optional[ProviderCategory] = None,
    ) -> Optional[Provider]:
        """Store the current live settings as a new provider.

        Returns None when there is no live settings file. The current
        provider pointer is not changed.
        """
        live = self.live_store.load()
        if live is None:
            return None
        provider = self.provider_store.add(
            name,
            live,
            description=description,
            category=category,
        )
        logger.info("Captured live settings as provider %s", name)
        return provider
