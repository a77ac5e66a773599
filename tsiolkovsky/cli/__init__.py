"""Tsiolkovsky command-line interface package."""

from tsiolkovsky.cli.main import cli, main

__all__ = ["cli", "main"]
