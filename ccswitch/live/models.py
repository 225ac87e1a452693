# -*- coding: utf-8 -*-
"""Pydantic model for Claude Code's live settings.json."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from ..constant import (
    AUTH_TOKEN_ENV_KEY,
    BASE_URL_ENV_KEY,
    CLAUDE_SETTINGS_SCHEMA_URL,
)


class LiveSettings(BaseModel):
    """A complete settings.json snapshot.

    The recognized keys are named for convenience only; their values are
    taken as-is, whatever their JSON type, so a load -> save cycle never
    changes or rejects anything Claude Code itself accepts. Everything
    else is kept as extra data. Keys are matched by their JSON spelling
    only. Serialization emits only the keys that were actually present
    and keeps them in the order they arrived in.
    """

    model_config = ConfigDict(extra="allow")

    schema_url: Optional[Any] = Field(
        default=None,
        alias="$schema",
        description="JSON schema marker",
    )
    env: Optional[Any] = Field(
        default=None,
        description="Environment variables exported to Claude Code",
    )
    model: Optional[Any] = Field(default=None, description="Model override")
    permissions: Optional[Any] = None
    hooks: Optional[Any] = None
    status_line: Optional[Any] = Field(default=None, alias="statusLine")
    always_thinking_enabled: Optional[Any] = Field(
        default=None,
        alias="alwaysThinkingEnabled",
    )
    enabled_plugins: Optional[Any] = Field(
        default=None,
        alias="enabledPlugins",
    )

    _key_order: List[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> "LiveSettings":
        settings = handler(data)
        if isinstance(data, dict):
            settings._key_order = list(data)
        return settings

    @model_serializer(mode="wrap")
    def _serialize_present_keys(
        self,
        handler: SerializerFunctionWrapHandler,
    ) -> Dict[str, Any]:
        data = handler(self)
        for name, alias in _field_aliases(type(self)).items():
            if name not in self.model_fields_set:
                data.pop(alias, None)

        ordered = {key: data[key] for key in self._key_order if key in data}
        # Keys added after loading go last.
        ordered.update(data)
        return ordered

    # ------------------------------------------------------------------
    # Typed access to the provider-identifying env entries
    # ------------------------------------------------------------------

    @property
    def auth_token(self) -> Optional[str]:
        return self._env_str(AUTH_TOKEN_ENV_KEY)

    @property
    def base_url(self) -> Optional[str]:
        return self._env_str(BASE_URL_ENV_KEY)

    def _env_str(self, key: str) -> Optional[str]:
        env = self.env if isinstance(self.env, dict) else {}
        value = env.get(key)
        return value if isinstance(value, str) else None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> "LiveSettings":
        """Skeleton used when there is no live settings.json to start from."""
        return cls.model_validate(
            {"$schema": CLAUDE_SETTINGS_SCHEMA_URL, "env": {}},
        )

    def with_credentials(
        self,
        auth_token: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> "LiveSettings":
        """Return a copy with the auth token / base URL env entries replaced.

        Empty values remove the corresponding entry. Nothing else in the
        settings is touched, except that an ``env`` that is not a mapping
        is replaced by one.
        """
        settings = self.model_copy(deep=True)
        env = dict(settings.env) if isinstance(settings.env, dict) else {}
        for key, value in (
            (AUTH_TOKEN_ENV_KEY, auth_token),
            (BASE_URL_ENV_KEY, base_url),
        ):
            if value:
                env[key] = value
            else:
                env.pop(key, None)
        settings.env = env
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict, exactly as it is written to disk."""
        return self.model_dump(mode="json", by_alias=True)


def _field_aliases(model: type[BaseModel]) -> Dict[str, str]:
    """Map field name -> JSON key."""
    return {
        name: field.alias or name
        for name, field in model.model_fields.items()
    }
