# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import click

from ..constant import LOG_LEVEL_ENV
from ..exceptions import CCSwitchError
from ..live import LiveSettingsStore
from ..providers import ProviderStore, ProviderSwitcher
from .providers_cmd import providers_group, use_cmd
from .utils import fail

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ccswitch")
@click.option(
    "--providers-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CCSWITCH_PROVIDERS_PATH",
    default=None,
    help="providers.json to use (default: ~/.cc/providers.json)",
)
@click.option(
    "--settings-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CCSWITCH_SETTINGS_PATH",
    default=None,
    help="Live settings.json (default: ~/.claude/settings.json)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=lambda: os.environ.get(LOG_LEVEL_ENV, "warning"),
    show_default=LOG_LEVEL_ENV + " or warning",
    help="Logging verbosity",
)
@click.pass_context
def cli(
    ctx: click.Context,
    providers_file: Optional[Path],
    settings_file: Optional[Path],
    log_level: str,
) -> None:
    """Switch Claude Code between saved API providers."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["switcher"] = ProviderSwitcher(
        ProviderStore(providers_file),
        LiveSettingsStore(settings_file),
    )


cli.add_command(providers_group)
cli.add_command(use_cmd)


def main() -> None:
    """Console entry point."""
    try:
        cli()  # pylint: disable=no-value-for-parameter
    except (CCSwitchError, OSError) as e:
        fail(str(e))
