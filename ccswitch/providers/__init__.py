# -*- coding: utf-8 -*-
"""Provider management — models, persistent store + switching."""

from .models import (
    Provider,
    ProviderCategory,
    ProvidersConfig,
    infer_category,
)
from .store import (
    ProviderStore,
    generate_provider_id,
    mask_api_key,
)
from .switch import ProviderSwitcher

__all__ = [
    # models
    "Provider",
    "ProviderCategory",
    "ProvidersConfig",
    "infer_category",
    # store
    "ProviderStore",
    "generate_provider_id",
    "mask_api_key",
    # switch
    "ProviderSwitcher",
]
