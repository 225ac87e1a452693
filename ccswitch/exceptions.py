# -*- coding: utf-8 -*-
"""Errors raised by the provider and live settings stores.

Filesystem failures are not wrapped: they surface as the ``OSError``
raised by the operating system.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class CCSwitchError(Exception):
    """Base class for ccswitch errors."""


class ProviderNotFoundError(CCSwitchError, LookupError):
    """No stored provider matches the requested id."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"Provider {provider_id} not found")
        self.provider_id = provider_id


class StoreParseError(CCSwitchError, ValueError):
    """A store file exists but does not hold a valid document."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
