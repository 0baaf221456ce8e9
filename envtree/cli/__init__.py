"""Command-line interface for envtree."""

from __future__ import annotations

from envtree.cli.main import cli

__all__ = ["cli"]
