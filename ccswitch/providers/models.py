# -*- coding: utf-8 -*-
"""Pydantic data models for stored providers."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constant import API_KEY_PREFIX
from ..live.models import LiveSettings

ProviderCategory = Literal["subscription", "api"]

# Optional provider fields, emitted only when set.
_METADATA_FIELDS = {
    "description",
    "category",
    "created_at",
    "icon",
    "icon_color",
}


class Provider(BaseModel):
    """A named profile holding a complete settings.json snapshot."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., description="Generated identifier, never changes")
    name: str = Field(..., description="User-chosen provider name")
    settings_config: LiveSettings = Field(
        ...,
        alias="settingsConfig",
        description="Complete live settings snapshot",
    )
    description: Optional[str] = None
    category: Optional[ProviderCategory] = Field(
        default=None,
        description="subscription login or API key",
    )
    created_at: Optional[int] = Field(
        default=None,
        alias="createdAt",
        description="Creation time in milliseconds since the epoch",
    )
    icon: Optional[str] = None
    icon_color: Optional[str] = Field(default=None, alias="iconColor")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; unset metadata is left out.

        Keys this tool does not know about are written back unchanged.
        """
        out: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "settingsConfig": self.settings_config.to_dict(),
        }
        out.update(
            self.model_dump(
                mode="json",
                by_alias=True,
                exclude_none=True,
                include=_METADATA_FIELDS,
            ),
        )
        out.update(self.model_extra or {})
        return out


class ProvidersConfig(BaseModel):
    """Top-level structure of providers.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    providers: List[Provider] = Field(default_factory=list)
    current_provider_id: Optional[str] = Field(
        default=None,
        alias="currentProviderId",
        description="Id of the active provider (a reference, may dangle)",
    )

    def find(self, provider_id: str) -> Optional[Provider]:
        """Return the provider with *provider_id*, or None."""
        for provider in self.providers:
            if provider.id == provider_id:
                return provider
        return None

    def current(self) -> Optional[Provider]:
        """Resolve the current pointer; None if unset or dangling."""
        if not self.current_provider_id:
            return None
        return self.find(self.current_provider_id)

    @property
    def has_dangling_current(self) -> bool:
        return bool(self.current_provider_id) and self.current() is None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "providers": [p.to_dict() for p in self.providers],
        }
        if self.current_provider_id:
            out["currentProviderId"] = self.current_provider_id
        out.update(self.model_extra or {})
        return out


def infer_category(settings: LiveSettings) -> ProviderCategory:
    """Guess the provider category from the live auth token."""
    token = settings.auth_token
    if token and token.startswith(API_KEY_PREFIX):
        return "api"
    return "subscription"
