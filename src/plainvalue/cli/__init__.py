"""
CLI module for plainvalue.

Provides the command-line interface using Click.
"""

from plainvalue.cli.main import cli, main

__all__ = ["main", "cli"]
