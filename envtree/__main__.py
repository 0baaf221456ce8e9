"""CLI entry point for envtree package.

Allows running via: python -m envtree
"""

from __future__ import annotations

from envtree.cli.main import cli

if __name__ == "__main__":
    cli()
