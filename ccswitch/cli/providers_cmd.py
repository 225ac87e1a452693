# -*- coding: utf-8 -*-
"""CLI commands for managing and switching providers."""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urlparse

import click

from ..exceptions import ProviderNotFoundError
from ..live import LiveSettings
from ..providers import (
    Provider,
    ProvidersConfig,
    ProviderSwitcher,
    infer_category,
    mask_api_key,
)
from .utils import fail, print_json, prompt_choice


def _switcher(ctx: click.Context) -> ProviderSwitcher:
    return ctx.obj["switcher"]


def _endpoint_host(provider: Provider) -> str:
    base_url = provider.settings_config.base_url
    if not base_url:
        return ""
    return urlparse(base_url).netloc or base_url


def _describe(provider: Provider, config: ProvidersConfig) -> str:
    """One-line label: name, description, category, endpoint, current."""
    category = (
        "[subscription]" if provider.category == "subscription" else "[api]"
    )
    host = _endpoint_host(provider)
    parts = [provider.name]
    if provider.description:
        parts.append(provider.description)
    parts.append(category)
    if host:
        parts.append(f"@ {host}")
    if provider.id == config.current_provider_id:
        parts.append("(current)")
    return " ".join(parts)


def _sorted_for_display(config: ProvidersConfig) -> List[Provider]:
    """Current provider first, then newest first."""
    return sorted(
        config.providers,
        key=lambda p: (
            p.id != config.current_provider_id,
            -(p.created_at or 0),
        ),
    )


def _resolve_or_fail(switcher: ProviderSwitcher, ref: str) -> Provider:
    provider = switcher.provider_store.resolve(ref)
    if provider is None:
        fail(f"Provider '{ref}' not found")
    return provider


def _select_provider_interactive(
    config: ProvidersConfig,
    prompt_text: str,
) -> Provider:
    providers = _sorted_for_display(config)
    # Names may repeat; the id keeps every label distinct.
    labels = [f"{_describe(p, config)} ({p.id})" for p in providers]
    current = config.current()
    default_label = labels[providers.index(current)] if current else None
    chosen = prompt_choice(prompt_text, options=labels, default=default_label)
    return providers[labels.index(chosen)]


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Manage saved providers."""


# ---------------------------------------------------------------------------
# list / current / show / path
# ---------------------------------------------------------------------------


@providers_group.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show all saved providers."""
    config = _switcher(ctx).provider_store.load()
    if not config.providers:
        click.echo("No providers configured.")
        return
    for provider in _sorted_for_display(config):
        mark = "*" if provider.id == config.current_provider_id else " "
        click.echo(f"{mark} {_describe(provider, config)}")
        click.echo(f"    id: {provider.id}")


@providers_group.command("current")
@click.pass_context
def current_cmd(ctx: click.Context) -> None:
    """Show the active provider."""
    provider = _switcher(ctx).provider_store.get_current()
    if provider is None:
        click.echo("No current provider.")
        return
    config = _switcher(ctx).provider_store.load()
    click.echo(_describe(provider, config))


@providers_group.command("show")
@click.argument("ref")
@click.pass_context
def show_cmd(ctx: click.Context, ref: str) -> None:
    """Print a provider as JSON (auth token masked)."""
    provider = _resolve_or_fail(_switcher(ctx), ref)
    data = provider.to_dict()
    token = provider.settings_config.auth_token
    if token:
        data["settingsConfig"]["env"]["ANTHROPIC_AUTH_TOKEN"] = mask_api_key(
            token,
        )
    print_json(data)


@providers_group.command("path")
@click.pass_context
def path_cmd(ctx: click.Context) -> None:
    """Print the providers.json and live settings.json paths."""
    switcher = _switcher(ctx)
    click.echo(f"{'providers':10s}: {switcher.provider_store.path()}")
    click.echo(f"{'settings':10s}: {switcher.live_store.path()}")


# ---------------------------------------------------------------------------
# add / capture / remove
# ---------------------------------------------------------------------------


@providers_group.command("add")
@click.argument("name")
@click.option(
    "--api-key",
    prompt="API key (leave empty for subscription mode)",
    default="",
    hide_input=True,
    show_default=False,
    help="Stored as ANTHROPIC_AUTH_TOKEN",
)
@click.option(
    "--base-url",
    prompt="Custom API endpoint (optional)",
    default="",
    show_default=False,
    help="Stored as ANTHROPIC_BASE_URL",
)
@click.option("--description", default=None, help="Free-form description")
@click.pass_context
def add_cmd(
    ctx: click.Context,
    name: str,
    api_key: str,
    base_url: str,
    description: Optional[str],
) -> None:
    """Add a provider from an API key and endpoint.

    The rest of the settings is copied from the live settings.json.
    """
    switcher = _switcher(ctx)
    base = switcher.live_store.load() or LiveSettings.default()
    settings = base.with_credentials(
        auth_token=api_key.strip(),
        base_url=base_url.strip(),
    )
    category = "api" if api_key.strip() else "subscription"
    switcher.provider_store.add(
        name,
        settings,
        description=description or None,
        category=category,
    )
    mode = "API key" if category == "api" else "subscription"
    endpoint = " with custom endpoint" if base_url.strip() else ""
    click.echo(f"✓ Provider '{name}' added ({mode}{endpoint})")


@providers_group.command("capture")
@click.argument("name")
@click.option("--description", default=None, help="Free-form description")
@click.pass_context
def capture_cmd(
    ctx: click.Context,
    name: str,
    description: Optional[str],
) -> None:
    """Save the live settings.json as a new provider."""
    switcher = _switcher(ctx)
    live = switcher.live_store.load()
    if live is None:
        fail(f"Could not read {switcher.live_store.path()}")
    category = infer_category(live)
    provider = switcher.capture_current_as_provider(
        name,
        description=description or None,
        category=category,
    )
    if provider is None:
        fail("Failed to capture current config")
    click.echo(f"✓ Provider '{name}' added (captured from current config)")
    click.echo(f"  Type: {category}")
    if live.base_url:
        click.echo(f"  Endpoint: {live.base_url}")


@providers_group.command("remove")
@click.argument("ref")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_cmd(ctx: click.Context, ref: str, yes: bool) -> None:
    """Remove a provider by id or name."""
    switcher = _switcher(ctx)
    provider = _resolve_or_fail(switcher, ref)
    if not yes and not click.confirm(
        f"Remove provider '{provider.name}'?",
        default=False,
    ):
        click.echo("Cancelled")
        return
    if switcher.provider_store.remove(provider.id):
        click.echo(f"✓ Provider '{provider.name}' removed")
    else:
        fail(f"Provider '{provider.name}' not found")


def _add_provider_interactive(ctx: click.Context) -> None:
    """Ask how to add a provider, then run ``capture`` or ``add``."""
    modes = [
        "Capture current config (recommended for subscription)",
        "Enter API key and endpoint manually",
    ]
    mode = prompt_choice("How do you want to add a provider?", options=modes)
    name = click.prompt("Provider name").strip()
    description = click.prompt(
        "Description (optional)",
        default="",
        show_default=False,
    ).strip()

    if mode == modes[0]:
        ctx.invoke(capture_cmd, name=name, description=description)
        return

    api_key = click.prompt(
        "API key (leave empty for subscription mode)",
        default="",
        hide_input=True,
        show_default=False,
    )
    base_url = click.prompt(
        "Custom API endpoint (optional)",
        default="",
        show_default=False,
    )
    ctx.invoke(
        add_cmd,
        name=name,
        api_key=api_key,
        base_url=base_url,
        description=description,
    )


# ---------------------------------------------------------------------------
# use
# ---------------------------------------------------------------------------


@click.command("use")
@click.argument("ref", required=False, default=None)
@click.pass_context
def use_cmd(ctx: click.Context, ref: Optional[str]) -> None:
    """Switch to a provider (by id or name, or pick from a menu)."""
    switcher = _switcher(ctx)
    config = switcher.provider_store.load()
    if not config.providers:
        click.echo("No providers configured. Let's add one.\n")
        _add_provider_interactive(ctx)
        return

    if ref is None:
        provider = _select_provider_interactive(config, "Select a provider:")
    else:
        provider = _resolve_or_fail(switcher, ref)

    try:
        provider = switcher.switch_to(provider.id)
    except ProviderNotFoundError as e:
        fail(str(e))

    kind = "subscription" if provider.category == "subscription" else "API key"
    base_url = provider.settings_config.base_url
    endpoint = f" ({base_url})" if base_url else ""
    click.echo(f"✓ Switched to provider: {provider.name} [{kind}{endpoint}]")
