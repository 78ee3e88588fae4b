"""
Main CLI entry point for plainvalue.

Provides the command-line interface using Click. Every command reads
YAML or JSON documents (use "-" for stdin) and applies one traversal
operation.
"""

import logging as _logging
import os as _os
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import rich.console as _rich_console
import rich.logging as _rich_logging
import rich.syntax as _rich_syntax

import plainvalue
import plainvalue.config as config
import plainvalue.config.types as config_types
import plainvalue.documents as documents
import plainvalue.traversal as traversal

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Sentinel for a path that does not resolve
_NOT_FOUND = object()

# Handler installed on the "plainvalue" logger by the CLI (at most one)
_log_handler: _logging.Handler | None = None


def _configure_logging(logging_config: config_types.LoggingConfig) -> None:
    """Send plainvalue log records to stderr at the configured level."""
    global _log_handler

    package_logger = _logging.getLogger(plainvalue.__name__)
    if _log_handler is None:
        _log_handler = _rich_logging.RichHandler(
            console=_rich_console.Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        package_logger.addHandler(_log_handler)
    _log_handler.setFormatter(_logging.Formatter(logging_config.format))
    package_logger.setLevel(logging_config.level)


def _load_settings() -> config.Settings:
    """Load settings, turning config problems into CLI errors."""
    try:
        return config.Settings()
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from e
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid configuration:\n{e}") from e


def _load(source: str) -> _typing.Any:
    """Load a document, turning read/parse problems into CLI errors."""
    try:
        return documents.load_document(source)
    except documents.DocumentError as e:
        raise _click.ClickException(str(e)) from e


def _parse(text: str) -> _typing.Any:
    """Parse a command-line value, turning YAML errors into CLI errors."""
    try:
        return documents.parse_value(text)
    except documents.DocumentError as e:
        raise _click.ClickException(str(e)) from e


def _should_use_color(setting: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. Explicit setting (--color/--no-color, config file, PLAINVALUE_OUTPUT__COLOR)
    2. NO_COLOR env var (if set, disable color) - standard convention
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested (not auto-detected).
    """
    if setting is not None:
        return (setting, setting)

    # Check NO_COLOR standard (https://no-color.org/)
    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_document(text: str, fmt: str, *, color: bool, force_color: bool) -> None:
    """Print document text, optionally with syntax highlighting.

    Args:
        text: The serialized document.
        fmt: "yaml" or "json" (the lexer to highlight with).
        color: Whether to use syntax highlighting.
        force_color: Force color even when not a TTY (for piping with --color).
    """
    if not color:
        _click.echo(text, nl=False)
        return

    # When forcing color (explicit --color flag):
    # - force_terminal=True: output color even when piped
    # - no_color=False: override NO_COLOR env var
    # - color_system='truecolor': override FORCE_COLOR=0 env var
    console = _rich_console.Console(
        force_terminal=force_color,
        no_color=False if force_color else None,
        color_system="truecolor" if force_color else "auto",
    )
    syntax = _rich_syntax.Syntax(
        text.rstrip("\n"),
        fmt,
        theme="monokai",
        background_color="default",
    )
    console.print(syntax)


def _emit(ctx: _click.Context, value: _typing.Any) -> None:
    """Serialize a value with the output settings and print it."""
    settings: config.Settings = ctx.obj["settings"]
    output = settings.output
    text = documents.dump_document(
        value,
        output.format,
        indent=output.indent,
        sort_keys=output.sort_keys,
    )
    color_enabled, force_color = _should_use_color(output.color)
    _print_document(text, output.format, color=color_enabled, force_color=force_color)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(plainvalue.__version__, "-v", "--version", prog_name="plainvalue")
@_click.option(
    "--format",
    "output_format",
    type=_click.Choice(documents.FORMATS),
    default=None,
    help="Output format (default from config: yaml)",
)
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.option(
    "--log-level",
    type=_click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    output_format: str | None,
    use_color: bool | None,
    log_level: str | None,
) -> None:
    """
    plainvalue - deep clone, merge, compare and flatten YAML/JSON data.

    SOURCE arguments are file paths; use '-' to read from stdin.

    \b
    Examples:
        plainvalue get config.yaml server.port
        plainvalue set config.yaml server.port 8080
        plainvalue flatten config.yaml
        plainvalue merge defaults.yaml overrides.yaml
        plainvalue --format json keys config.yaml
        cat a.json | plainvalue equal - b.json
    """
    settings = _load_settings()

    if output_format:
        settings.output.format = _typing.cast(config_types.OutputFormat, output_format)
    if use_color is not None:
        settings.output.color = use_color
    if log_level:
        settings.logging.level = _typing.cast(config_types.LogLevel, log_level.upper())

    _configure_logging(settings.logging)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# =============================================================================
# Path Commands
# =============================================================================


@cli.command(name="get")
@_click.argument("source")
@_click.argument("path")
@_click.option(
    "--default",
    "default_text",
    type=str,
    default=None,
    help="Value to print when the path does not resolve (parsed as YAML)",
)
@_click.pass_context
def get_cmd(ctx: _click.Context, source: str, path: str, default_text: str | None) -> None:
    """Print the value at PATH.

    A path that is missing, or that ends at a null value, prints the
    --default value; without --default it is an error.
    """
    document = _load(source)
    value = traversal.get_nested_value(document, path, _NOT_FOUND)
    if value is _NOT_FOUND:
        if default_text is None:
            raise _click.ClickException(f"Path not found: {path}")
        value = _parse(default_text)
    _emit(ctx, value)


@cli.command(name="set")
@_click.argument("source")
@_click.argument("path")
@_click.argument("value")
@_click.pass_context
def set_cmd(ctx: _click.Context, source: str, path: str, value: str) -> None:
    """Set PATH to VALUE and print the updated document.

    VALUE is parsed as YAML, so '8080' is a number and '[a, b]' a list.
    Intermediate mappings are created as needed. The source file is not
    modified.
    """
    document = _load(source)
    if document is None:
        document = {}
    try:
        traversal.set_nested_value(document, path, _parse(value))
    except traversal.InvalidArgumentError as e:
        raise _click.ClickException(f"Cannot set {path}: {e}") from e
    _emit(ctx, document)


@cli.command(name="has")
@_click.argument("source")
@_click.argument("path")
@_click.pass_context
def has_cmd(ctx: _click.Context, source: str, path: str) -> None:
    """Check whether PATH resolves to a non-null value.

    Prints true or false and exits with status 0 or 1.
    """
    found = traversal.has_path(_load(source), path)
    _click.echo("true" if found else "false")
    ctx.exit(0 if found else 1)


# =============================================================================
# Structure Commands
# =============================================================================


@cli.command(name="flatten")
@_click.argument("source")
@_click.option("--prefix", type=str, default="", help="Prefix to prepend to every key")
@_click.pass_context
def flatten_cmd(ctx: _click.Context, source: str, prefix: str) -> None:
    """Flatten nested mappings into dotted keys."""
    _emit(ctx, traversal.flatten_object(_load(source), prefix))


@cli.command(name="unflatten")
@_click.argument("source")
@_click.pass_context
def unflatten_cmd(ctx: _click.Context, source: str) -> None:
    """Expand dotted keys into nested mappings."""
    _emit(ctx, traversal.unflatten_object(_load(source)))


@cli.command(name="keys")
@_click.argument("source")
def keys_cmd(source: str) -> None:
    """Print the dotted path of every leaf, one per line."""
    for key in traversal.get_all_keys(_load(source)):
        _click.echo(key)


@cli.command(name="merge")
@_click.argument("sources", nargs=-1, required=True)
@_click.pass_context
def merge_cmd(ctx: _click.Context, sources: tuple[str, ...]) -> None:
    """Deep merge documents; later SOURCES win.

    Nested mappings are merged key by key. Lists and scalars are replaced.
    Documents that are not mappings are skipped.
    """
    _emit(ctx, traversal.deep_merge(*(_load(source) for source in sources)))


@cli.command(name="equal")
@_click.argument("first")
@_click.argument("second")
@_click.pass_context
def equal_cmd(ctx: _click.Context, first: str, second: str) -> None:
    """Compare two documents structurally (mapping key order is ignored).

    Prints equal or different and exits with status 0 or 1.
    """
    same = traversal.is_equal(_load(first), _load(second))
    _click.echo("equal" if same else "different")
    ctx.exit(0 if same else 1)


# =============================================================================
# Config Commands
# =============================================================================


@cli.group(name="config", invoke_without_command=True)
@_click.pass_context
def config_cmd(ctx: _click.Context) -> None:
    """Configuration management commands.

    Without a subcommand, shows configuration overview.
    """
    if ctx.invoked_subcommand is None:
        settings: config.Settings = ctx.obj["settings"]
        _click.echo("plainvalue Configuration:")
        _click.echo(f"  Output Format: {settings.output.format}")
        _click.echo(f"  Indent: {settings.output.indent}")
        _click.echo(f"  Sort Keys: {settings.output.sort_keys}")
        _click.echo(f"  Log Level: {settings.logging.level}")
        _click.echo(f"  Project Root: {settings.project_root}")
        _click.echo(f"  Config Dir: {settings.config_dir}")
        _click.echo("\nRun 'plainvalue config show' for full configuration details.")


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.option("--section", type=str, default=None, help="Show specific section only")
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool, section: str | None) -> None:
    """Show effective configuration from all sources.

    Unknown keys (possible typos) are listed on stderr.
    """
    settings: config.Settings = ctx.obj["settings"]
    full_config = settings.to_dict()

    if section:
        if section not in full_config:
            raise _click.ClickException(f"Unknown section: {section}")
        full_config = {section: full_config[section]}

    text = documents.dump_document(
        full_config,
        "json" if as_json else "yaml",
        indent=settings.output.indent,
    )
    color_enabled, force_color = _should_use_color(settings.output.color)
    _print_document(
        text,
        "json" if as_json else "yaml",
        color=color_enabled,
        force_color=force_color,
    )

    extras = settings.collect_all_extra_fields()
    if extras:
        _click.echo("Unknown config keys:", err=True)
        for key in sorted(extras):
            _click.echo(f"  {key}", err=True)


@config_cmd.command(name="path")
@_click.option("--all", "show_all", is_flag=True, help="Show all paths even if not found")
@_click.pass_context
def config_path(ctx: _click.Context, show_all: bool) -> None:
    """Show config file locations (highest precedence first)."""
    settings: config.Settings = ctx.obj["settings"]
    for name, path, exists in settings.get_layer_paths():
        if exists or show_all:
            marker = "✓" if exists else "✗"
            _click.echo(f"{marker} {name}: {path}")


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="plainvalue")


if __name__ == "__main__":
    main()
