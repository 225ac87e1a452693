from pathlib import Path

import pytest

from ccswitch.exceptions import ProviderNotFoundError
from ccswitch.providers import ProviderStore, ProviderSwitcher

from .conftest import read_json, write_json


def _make_current(store: ProviderStore, provider_id: str) -> None:
    config = store.load()
    config.current_provider_id = provider_id
    store.save(config)


def test_switch_backfills_outgoing_provider(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    p1 = provider_store.add("P1", {"env": {"TOKEN": "old"}})
    p2 = provider_store.add("P2", {"env": {"TOKEN": "p2"}, "model": "opus"})
    _make_current(provider_store, p1.id)
    # the user edited the live file while P1 was active
    write_json(settings_path, {"env": {"TOKEN": "old", "EXTRA": "user-edit"}})

    result = switcher.switch_to(p2.id)

    assert result.id == p2.id
    config = provider_store.load()
    assert config.current_provider_id == p2.id
    assert config.find(p1.id).settings_config.to_dict() == {
        "env": {"TOKEN": "old", "EXTRA": "user-edit"},
    }
    assert read_json(settings_path) == {"env": {"TOKEN": "p2"}, "model": "opus"}


def test_switch_without_live_file_skips_backfill(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    p1 = provider_store.add("P1", {"env": {"TOKEN": "one"}})
    p2 = provider_store.add("P2", {"env": {"TOKEN": "two"}})
    _make_current(provider_store, p1.id)

    switcher.switch_to(p2.id)

    assert provider_store.get_by_id(p1.id).settings_config.to_dict() == {
        "env": {"TOKEN": "one"},
    }
    assert read_json(settings_path) == {"env": {"TOKEN": "two"}}


def test_first_switch_has_nothing_to_backfill(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    write_json(settings_path, {"env": {"TOKEN": "unmanaged"}})
    p1 = provider_store.add("P1", {"env": {"TOKEN": "one"}})

    switcher.switch_to(p1.id)

    assert provider_store.get_current().id == p1.id
    assert provider_store.get_by_id(p1.id).settings_config.to_dict() == {
        "env": {"TOKEN": "one"},
    }
    assert read_json(settings_path) == {"env": {"TOKEN": "one"}}


def test_switch_to_current_rewrites_live_file_without_backfill(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    p1 = provider_store.add("P1", {"env": {"TOKEN": "stored"}})
    _make_current(provider_store, p1.id)
    write_json(settings_path, {"env": {"TOKEN": "edited"}})

    switcher.switch_to(p1.id)

    assert read_json(settings_path) == {"env": {"TOKEN": "stored"}}
    assert provider_store.get_by_id(p1.id).settings_config.to_dict() == {
        "env": {"TOKEN": "stored"},
    }


def test_switch_with_dangling_pointer(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    providers_path: Path,
    settings_path: Path,
):
    write_json(
        providers_path,
        {
            "providers": [
                {"id": "a", "name": "a", "settingsConfig": {"model": "m"}},
            ],
            "currentProviderId": "gone",
        },
    )
    write_json(settings_path, {"model": "live"})

    switcher.switch_to("a")

    assert provider_store.load().current_provider_id == "a"
    assert read_json(settings_path) == {"model": "m"}


def test_switch_to_unknown_id_changes_nothing(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    providers_path: Path,
    settings_path: Path,
):
    p1 = provider_store.add("P1", {"env": {"TOKEN": "one"}})
    _make_current(provider_store, p1.id)
    write_json(settings_path, {"env": {"TOKEN": "edited"}})
    providers_before = providers_path.read_bytes()
    live_before = settings_path.read_bytes()

    with pytest.raises(ProviderNotFoundError) as excinfo:
        switcher.switch_to("ghost")

    assert excinfo.value.provider_id == "ghost"
    assert providers_path.read_bytes() == providers_before
    assert settings_path.read_bytes() == live_before


def test_failed_provider_save_leaves_live_file_untouched(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    providers_path: Path,
    settings_path: Path,
    monkeypatch,
):
    p1 = provider_store.add("P1", {"env": {"TOKEN": "one"}})
    p2 = provider_store.add("P2", {"env": {"TOKEN": "two"}})
    _make_current(provider_store, p1.id)
    write_json(settings_path, {"env": {"TOKEN": "one"}})
    providers_before = providers_path.read_bytes()

    def broken_save(config):
        raise OSError("read-only filesystem")

    monkeypatch.setattr(provider_store, "save", broken_save)

    with pytest.raises(OSError):
        switcher.switch_to(p2.id)

    assert providers_path.read_bytes() == providers_before
    assert read_json(settings_path) == {"env": {"TOKEN": "one"}}


def test_capture_without_live_file_returns_none(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
):
    assert switcher.capture_current_as_provider("x") is None
    assert provider_store.load().providers == []


def test_capture_copies_live_settings(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    live = {
        "env": {"ANTHROPIC_AUTH_TOKEN": "sk-ant-abc"},
        "permissions": {"allow": ["Bash"]},
        "unknown": True,
    }
    write_json(settings_path, live)
    existing = provider_store.add("existing", {})
    _make_current(provider_store, existing.id)

    provider = switcher.capture_current_as_provider(
        "captured",
        description="from live",
        category="api",
    )

    assert provider is not None
    stored = provider_store.get_by_name("captured")
    assert stored.id == provider.id
    assert stored.description == "from live"
    assert stored.category == "api"
    assert stored.settings_config.to_dict() == live
    # capturing is not switching
    assert provider_store.load().current_provider_id == existing.id


def test_backfill_keeps_off_type_live_values(
    switcher: ProviderSwitcher,
    provider_store: ProviderStore,
    settings_path: Path,
):
    p1 = provider_store.add("P1", {"model": "opus"})
    p2 = provider_store.add("P2", {"model": "sonnet"})
    _make_current(provider_store, p1.id)
    write_json(settings_path, {"model": 5, "hooks": []})

    switcher.switch_to(p2.id)

    assert provider_store.get_by_id(p1.id).settings_config.to_dict() == {
        "model": 5,
        "hooks": [],
    }
    assert read_json(settings_path) == {"model": "sonnet"}
