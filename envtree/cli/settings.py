"""Settings commands for envtree CLI."""

from __future__ import annotations

import click

from envtree.config import EnvTreeConfig


@click.command()
@click.option(
    "--all",
    "include_defaults",
    is_flag=True,
    default=False,
    help="Include values equal to the defaults",
)
@click.pass_context
def settings(ctx: click.Context, include_defaults: bool) -> None:
    r"""Display the effective envtree settings as YAML.

    \b
    Examples:
        $ envtree settings --all
        $ envtree --prefix MYAPP_ settings
    """
    config: EnvTreeConfig = ctx.obj["settings"]
    click.echo(config.to_yaml(include_defaults=include_defaults).rstrip("\n"))
