"""
Reading and writing plain values as YAML or JSON documents.

YAML is the input format; since JSON is (for practical purposes) a YAML
subset, JSON files load through the same path. Output can be either.

YAML timestamps load as datetime/date objects, which traversal treats
as opaque date scalars. JSON output renders them in ISO 8601.
"""

import datetime as _datetime
import json as _json
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import yaml as _yaml

import plainvalue.constants as constants

STDIN_SOURCE = "-"
"""Source name that reads the document from standard input."""

FORMATS: tuple[str, ...] = ("yaml", "json")
"""Supported output formats."""

_YAML_DOCUMENT_END = "\n...\n"


class DocumentError(Exception):
    """Error reading or parsing a document."""

    def __init__(self, source: str | _pathlib.Path, message: str) -> None:
        self.source = source
        super().__init__(f"Error in document {source}: {message}")


def _read_source(source: str | _pathlib.Path) -> str:
    """Read raw text from a path or stdin."""
    if str(source) == STDIN_SOURCE:
        return _sys.stdin.read()

    path = _pathlib.Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise DocumentError(source, f"permission denied: {e}") from e
    except OSError as e:
        raise DocumentError(source, f"cannot read file: {e}") from e


def load_text(text: str, source: str | _pathlib.Path = "<string>") -> _typing.Any:
    """
    Parse YAML (or JSON) text into a plain value.

    Args:
        text: Document content.
        source: Name used in error messages.

    Returns:
        The parsed value, or None for an empty document.

    Raises:
        DocumentError: If the text is malformed.
    """
    try:
        return _yaml.safe_load(text)
    except _yaml.YAMLError as e:
        raise DocumentError(source, f"invalid YAML: {e}") from e


def load_document(source: str | _pathlib.Path) -> _typing.Any:
    """
    Load a plain value from a file, or from stdin when source is "-".

    Raises:
        DocumentError: If the source cannot be read or parsed.
    """
    return load_text(_read_source(source), source)


def parse_value(text: str) -> _typing.Any:
    """
    Parse a command-line value as a YAML scalar or collection.

    Example:
        >>> parse_value("42")
        42
        >>> parse_value("{a: 1}")
        {'a': 1}
        >>> parse_value("hello")
        'hello'
    """
    return load_text(text, "<argument>")


def _json_default(value: _typing.Any) -> _typing.Any:
    if isinstance(value, (_datetime.date, _datetime.time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_document(
    value: _typing.Any,
    fmt: str = constants.DEFAULT_OUTPUT_FORMAT,
    *,
    indent: int = constants.DEFAULT_INDENT,
    sort_keys: bool = False,
) -> str:
    """
    Serialize a plain value as YAML or JSON.

    Args:
        value: The value to serialize.
        fmt: "yaml" or "json".
        indent: Indentation width.
        sort_keys: Whether to sort mapping keys.

    Returns:
        The document text, ending in a newline.

    Raises:
        ValueError: If fmt is not a supported format.
    """
    if fmt == "json":
        return _json.dumps(value, indent=indent or None, sort_keys=sort_keys, default=_json_default) + "\n"
    if fmt == "yaml":
        text = _yaml.safe_dump(
            value,
            default_flow_style=False,
            sort_keys=sort_keys,
            indent=min(max(indent, 2), 9),  # PyYAML accepts 2..9
            allow_unicode=True,
        )
        # Bare scalars get an explicit document end marker
        if text.endswith(_YAML_DOCUMENT_END):
            text = text[: -len(_YAML_DOCUMENT_END) + 1]
        return text
    raise ValueError(f"Unknown format: {fmt!r} (expected one of {', '.join(FORMATS)})")
