# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from typing import Any, Optional, Sequence

import click


def prompt_choice(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show a numbered menu and return the chosen label."""
    click.echo(prompt_text)
    for i, label in enumerate(options, start=1):
        click.echo(f"  {i}. {label}")
    default_index = options.index(default) + 1 if default in options else None
    index = click.prompt(
        "Enter number",
        type=click.IntRange(1, len(options)),
        default=default_index,
    )
    return options[index - 1]


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


def fail(message: str) -> None:
    """Print *message* in red and exit with status 1."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    raise SystemExit(1)
