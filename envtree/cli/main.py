"""Main CLI entry point for envtree package.

This module provides the main CLI command group. Global options select the
settings file and the variable prefix, and set up logging before any
subcommand runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from envtree import __version__
from envtree.cli.utils import load_settings_for_cli
from envtree.config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="envtree")
@click.option(
    "--settings-file",
    "-s",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to envtree settings file (default: built-in defaults)",
)
@click.option(
    "--prefix",
    "-p",
    type=str,
    default=None,
    help="Environment variable prefix (default: LIBRELOGIN_)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    settings_file: Path | None,
    prefix: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Overlay environment variables onto configuration files.

    Variables named PREFIX + key path, with dots and hyphens written as
    underscores, override the matching configuration values.

    \b
    Examples:
        # Show version
        $ envtree --version

        # Apply overrides and print the result
        $ LIBRELOGIN_MAIL_HOST=smtp.example.org envtree apply config.yaml

        # Use another prefix
        $ envtree --prefix MYAPP_ apply config.yaml

        # Explain how a variable name resolves
        $ envtree resolve LIBRELOGIN_MAIL_HOST --key mail.host
    """
    overrides: dict[str, Any] = {}
    if prefix is not None:
        overrides["overlay__prefix"] = prefix
    if verbose:
        overrides["logging__level"] = "DEBUG"
    elif quiet:
        overrides["logging__level"] = "ERROR"

    settings = load_settings_for_cli(settings_file, overrides, verbose=verbose)
    configure_logging(settings.logging)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Import commands
from envtree.cli.overlay import apply, keys, resolve  # noqa: E402
from envtree.cli.settings import settings  # noqa: E402

cli.add_command(apply)
cli.add_command(resolve)
cli.add_command(keys)
cli.add_command(settings)
