"""
Shared constants for plainvalue.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Path addressing
PATH_SEPARATOR = "."
"""Separator between components of a nested path ("a.b.c")."""

# Output defaults
DEFAULT_OUTPUT_FORMAT = "yaml"
"""Default document format for CLI output."""

DEFAULT_INDENT = 2
"""Default indentation for JSON and YAML output."""

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
"""Default log level for the CLI."""

DEFAULT_LOG_FORMAT = "%(name)s: %(message)s"
"""Default log message format (the level is rendered by the handler)."""

# Environment
ENV_PREFIX = "PLAINVALUE_"
"""Prefix for environment variable overrides."""
