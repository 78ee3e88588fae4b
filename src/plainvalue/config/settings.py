"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with PLAINVALUE_ prefix
3. Layered YAML config files:
   - Project config: .plainvalue/config.yaml (highest)
   - User config: ~/.config/plainvalue/config.yaml
   - Built-in defaults: bundled defaults/config.yaml (lowest)

Nested config uses double underscore delimiter:
  PLAINVALUE_OUTPUT__FORMAT=json
  PLAINVALUE_LOGGING__LEVEL=debug
"""

import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import plainvalue.config.sources as sources
import plainvalue.config.types as types
import plainvalue.constants as constants
import plainvalue.traversal as traversal


def find_project_root(start_path: _pathlib.Path | None = None) -> _pathlib.Path:
    """
    Find the project root directory for project-level config.

    Walks up from start_path looking for a .plainvalue directory and
    falls back to start_path itself.

    Args:
        start_path: Starting path for search. Defaults to cwd.
    """
    if start_path is None:
        start_path = _pathlib.Path.cwd()
    start_path = start_path.resolve()

    for candidate in (start_path, *start_path.parents):
        if (candidate / sources.PROJECT_CONFIG_DIRNAME).is_dir():
            return candidate
    return start_path


class Settings(_pydantic_settings.BaseSettings):
    """
    plainvalue configuration settings.

    All settings can be overridden via environment variables with PLAINVALUE_ prefix.
    For nested config, use double underscore: PLAINVALUE_OUTPUT__INDENT=4

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (PLAINVALUE_*)
    3. Project config (.plainvalue/config.yaml)
    4. User config (~/.config/plainvalue/config.yaml)
    5. Built-in defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_nested_delimiter="__",  # PLAINVALUE_OUTPUT__FORMAT
        extra="allow",  # Preserve unknown fields so config show can report them
    )

    output: types.OutputConfig = _pydantic.Field(default_factory=types.OutputConfig)
    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args), highest
        2. env_settings (PLAINVALUE_* env vars)
        3. dotenv_settings (only when _env_file is passed)
        4. yaml_settings (layered config.yaml files)
        5. (defaults via Field definitions), lowest
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.LayeredYamlSettingsSource(settings_cls, find_project_root()),
            file_secret_settings,
        )

    # =========================================================================
    # Paths
    # =========================================================================

    @property
    def config_dir(self) -> _pathlib.Path:
        """User config directory."""
        return sources.get_user_config_dir()

    @property
    def project_root(self) -> _pathlib.Path:
        """Project root used for project-level config."""
        return find_project_root()

    def get_layer_paths(self) -> list[tuple[str, _pathlib.Path, bool]]:
        """
        Get (layer_name, path, exists) for every config layer, highest first.
        """
        paths = [
            ("project", sources.get_project_config_path(self.project_root)),
            ("user", sources.get_user_config_path()),
            ("built-in", sources.get_builtin_defaults_path()),
        ]
        return [(name, path, path.exists()) for name, path in paths]

    # =========================================================================
    # Introspection
    # =========================================================================

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Top-level fields that are not part of the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Collect unknown fields at every level as dotted paths.

        Example:
            {"outptu.format": "json", "output.colour": True}
        """
        extras = traversal.flatten_object(self.get_extra_fields())
        extras.update(self.output.collect_all_extra_fields("output"))
        extras.update(self.logging.collect_all_extra_fields("logging"))
        return extras

    def has_extra_fields(self) -> bool:
        """Check if any level of the configuration has unknown fields."""
        return bool(self.collect_all_extra_fields())

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return settings as a JSON-compatible dict, including unknown fields."""
        return self.model_dump(mode="json")
