"""CLI utility functions for envtree package.

This module provides utility functions for the CLI including settings loading,
output formatting, secret redaction, and status messages.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from io import StringIO
from pathlib import Path
from typing import Any, Literal

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from envtree.config import EnvTreeConfig, dump_yaml, load_config
from envtree.keys import ConfigurationKey
from envtree.overlay import is_secret_path

# Status lines go to stderr so that stdout stays machine-readable.
console = Console(stderr=True)


def load_settings_for_cli(
    settings_file: Path | None,
    overrides: dict[str, Any],
    verbose: bool = False,
) -> EnvTreeConfig:
    """Load envtree settings with CLI options.

    Parameters
    ----------
    settings_file : Path | None
        Path to settings file (None to use defaults).
    overrides : dict[str, Any]
        ``section__field`` overrides taken from command-line options.
    verbose : bool
        Whether to enable verbose output.

    Returns
    -------
    EnvTreeConfig
        Loaded settings. Exits with code 1 if they cannot be loaded.
    """
    try:
        settings = load_config(config_path=settings_file, **overrides)
    except FileNotFoundError:
        print_error(f"Settings file not found: {settings_file}", exit_code=1)
        raise  # For type checking
    except (yaml.YAMLError, ValidationError) as e:
        print_error(f"Invalid settings: {e}", exit_code=1)
        raise  # For type checking

    if verbose and settings_file is not None:
        console.print(f"[green]✓[/green] Loaded settings from: {settings_file}")

    return settings


def validate_key_paths(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[ConfigurationKey]:
    """Click callback turning ``--key`` values into configuration keys."""
    keys: list[ConfigurationKey] = []
    for key in value:
        try:
            keys.append(ConfigurationKey(key=key))
        except ValidationError as e:
            message = e.errors()[0]["msg"]
            raise click.BadParameter(f"{key!r}: {message}", ctx=ctx, param=param)
    return keys


def redact_secrets(
    data: dict[str, Any],
    markers: Iterable[str],
    mask: str,
    _path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Replace values stored under secret-looking paths.

    Parameters
    ----------
    data : dict[str, Any]
        Configuration data.
    markers : Iterable[str]
        Lower-case substrings marking a dotted path as secret.
    mask : str
        Replacement for secret values.

    Returns
    -------
    dict[str, Any]
        Copy of the data with secret values replaced. Empty secrets are kept.

    Examples
    --------
    >>> data = {"mail": {"password": "hunter2", "host": "h"}}
    >>> redact_secrets(data, ["password"], "****")
    {'mail': {'password': '****', 'host': 'h'}}
    """
    markers = tuple(markers)
    result: dict[str, Any] = {}
    for key, value in data.items():
        path = (*_path, str(key))
        if isinstance(value, dict):
            result[key] = redact_secrets(value, markers, mask, path)
        elif value not in (None, "") and is_secret_path(path, markers):
            result[key] = mask
        else:
            result[key] = value
    return result


def format_output(
    data: dict[str, Any],
    format_type: Literal["yaml", "json", "table"],
) -> str:
    """Format configuration data for CLI output.

    Parameters
    ----------
    data : dict[str, Any]
        Data to format.
    format_type : {"yaml", "json", "table"}
        Output format type.

    Returns
    -------
    str
        Formatted output string.

    Raises
    ------
    ValueError
        If format_type is invalid.
    """
    if format_type == "yaml":
        return dump_yaml(data).rstrip("\n")
    elif format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "table":
        return _dict_to_table(data)
    else:
        raise ValueError(f"Invalid format type: {format_type}")


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict) and value:
            rows.extend(_flatten(value, path))
        else:
            rows.append((path, value))
    return rows


def _dict_to_table(data: dict[str, Any], title: str | None = None) -> str:
    """Render dictionary leaves as a rich table, one dotted key per row."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="yellow", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in _flatten(data):
        if isinstance(value, list):
            value_str = "\n".join(str(item) for item in value)
        else:
            value_str = str(value)
        table.add_row(key, value_str)

    # Capture table output
    string_io = StringIO()
    temp_console = Console(file=string_io, force_terminal=True, width=120)
    temp_console.print(table)
    return string_io.getvalue()


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    console.print(f"[red]✗ Error:[/red] {escape(message)}")
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ Warning:[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ Info:[/blue] {escape(message)}")
