"""Overlay commands for envtree CLI.

This module provides commands for applying environment overrides to a
configuration file, explaining how a single variable name resolves, and
listing the keys a configuration file registers.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
import yaml

from envtree.cli.utils import (
    format_output,
    print_error,
    print_info,
    print_success,
    print_warning,
    redact_secrets,
    validate_key_paths,
)
from envtree.coercion import coerce_value
from envtree.config import EnvTreeConfig
from envtree.keys import ConfigurationKey, keys_from_tree, known_paths
from envtree.overlay import EnvOverlay, is_secret_path
from envtree.segments import resolve_segments, split_env_name
from envtree.tree import ConfigTree


def _load_tree(config_file: Path) -> ConfigTree:
    try:
        return ConfigTree.from_file(config_file)
    except (FileNotFoundError, yaml.YAMLError) as e:
        print_error(f"Failed to load configuration: {e}")
        raise  # For type checking


@click.command()
@click.argument(
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json", "table"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.option(
    "--key",
    "-k",
    "extra_keys",
    multiple=True,
    callback=validate_key_paths,
    help="Additional known key path (e.g., mail.password)",
)
@click.option(
    "--no-redact",
    is_flag=True,
    default=False,
    help="Show secret values (passwords, tokens, etc.)",
)
@click.pass_context
def apply(
    ctx: click.Context,
    config_file: Path,
    format_type: str,
    extra_keys: list[ConfigurationKey],
    no_redact: bool,
) -> None:
    r"""Apply environment overrides to a configuration file and print it.

    Every leaf of CONFIG_FILE is a known key. The file itself is not
    modified.

    \b
    Examples:
        $ LIBRELOGIN_MAIL_HOST=smtp.example.org envtree apply config.yaml
        $ envtree apply config.yaml --format json
        $ envtree apply config.yaml --key totp.enabled
    """
    settings: EnvTreeConfig = ctx.obj["settings"]
    quiet: bool = ctx.obj.get("quiet", False)

    tree = _load_tree(config_file)
    known_keys = keys_from_tree(tree) + extra_keys

    overlay = EnvOverlay.from_config(settings.overlay)
    report = overlay.apply_overrides(tree, known_keys)

    data = tree.to_dict()
    if not no_redact:
        data = redact_secrets(
            data, settings.overlay.secret_markers, settings.overlay.mask
        )
    click.echo(format_output(data, format_type))  # type: ignore[arg-type]

    if quiet:
        return
    if report.aborted is not None:
        print_warning(f"No overrides applied: {report.aborted}")
        return
    for failure in report.failed:
        print_warning(f"Skipped {failure.variable}: {failure.error}")
    unmatched = sum(1 for applied in report.applied if not applied.matched_key)
    if unmatched:
        print_info(f"{unmatched} override(s) did not match a known key")
    print_success(f"Applied {len(report.applied)} override(s)")


@click.command()
@click.argument("variable")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file whose leaves are known keys",
)
@click.option(
    "--key",
    "-k",
    "extra_keys",
    multiple=True,
    callback=validate_key_paths,
    help="Known key path (repeatable)",
)
@click.pass_context
def resolve(
    ctx: click.Context,
    variable: str,
    config_file: Path | None,
    extra_keys: list[ConfigurationKey],
) -> None:
    r"""Show which configuration path VARIABLE overrides.

    \b
    Examples:
        $ envtree resolve LIBRELOGIN_MAIL_HOST -k mail.host
        $ envtree resolve LIBRELOGIN_ALLOWED_COMMANDS_WHILE_UNAUTHORIZED -c config.yaml
    """
    settings: EnvTreeConfig = ctx.obj["settings"]
    prefix = settings.overlay.prefix

    words = split_env_name(variable, prefix)
    if words is None:
        print_error(f"{variable} does not start with prefix {prefix}")
        return

    known_keys = list(extra_keys)
    if config_file is not None:
        known_keys.extend(keys_from_tree(_load_tree(config_file)))
    known = known_paths(known_keys)

    segments = resolve_segments(words, known)
    dotted = ".".join(segments)
    matched = dotted.lower() in known

    click.echo(f"variable: {variable}")
    click.echo(f"words:    {' '.join(words)}")
    click.echo(f"path:     {dotted}")
    click.echo(f"matched:  {'yes' if matched else 'no (one segment per word)'}")

    raw = os.environ.get(variable)
    if raw is not None:
        if is_secret_path(segments, settings.overlay.secret_markers):
            click.echo(f"value:    {settings.overlay.mask}")
        else:
            click.echo(f"value:    {coerce_value(raw)!r}")


@click.command()
@click.argument(
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def keys(config_file: Path) -> None:
    r"""List the key paths a configuration file registers.

    \b
    Examples:
        $ envtree keys config.yaml
    """
    for key in keys_from_tree(_load_tree(config_file)):
        click.echo(key.key)
