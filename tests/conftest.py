import json
from pathlib import Path

import pytest

from ccswitch.live import LiveSettingsStore
from ccswitch.providers import ProviderStore, ProviderSwitcher


@pytest.fixture
def providers_path(tmp_path: Path) -> Path:
    return tmp_path / "cc" / "providers.json"


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "claude" / "settings.json"


@pytest.fixture
def provider_store(providers_path: Path) -> ProviderStore:
    return ProviderStore(providers_path)


@pytest.fixture
def live_store(settings_path: Path) -> LiveSettingsStore:
    return LiveSettingsStore(settings_path)


@pytest.fixture
def switcher(provider_store, live_store) -> ProviderSwitcher:
    return ProviderSwitcher(provider_store, live_store)


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))
