"""Custom pydantic-settings source for plainvalue configuration.

This module provides:

- LayeredYamlSettingsSource: A pydantic-settings source that loads
  configuration from layered YAML files and combines them with
  traversal.deep_merge.

Configuration layers (in precedence order, highest first):
1. Environment variables (handled by pydantic-settings)
2. Project config: .plainvalue/config.yaml in project root
3. User config: ~/.config/plainvalue/config.yaml (or PLAINVALUE_CONFIG_DIR)
4. Built-in defaults: bundled config.yaml

Nested dictionaries merge across layers while other values (including
lists) are replaced by the higher layer.

Environment variables:
- PLAINVALUE_CONFIG_DIR: Override user config directory (default: ~/.config/plainvalue)
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import plainvalue.traversal as traversal

_logger = _logging.getLogger(__name__)

# Environment variable for overriding user config directory
ENV_CONFIG_DIR = "PLAINVALUE_CONFIG_DIR"

PROJECT_CONFIG_DIRNAME = ".plainvalue"
CONFIG_FILENAME = "config.yaml"


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


class LayeredYamlSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that loads layered YAML config files.

    Flow:
        1. Load each YAML file into a dict
        2. deep_merge the dicts (lowest precedence first)
        3. Return the merged dict to pydantic-settings for validation

    Layers (lowest to highest precedence):
    1. Built-in defaults (src/plainvalue/config/defaults/config.yaml)
    2. User config (~/.config/plainvalue/config.yaml)
    3. Project config (.plainvalue/config.yaml)
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        project_root: _pathlib.Path | None = None,
        *,
        user_config_path: _pathlib.Path | None = None,
        builtin_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            project_root: Optional project root path for project-level config.
            user_config_path: Override path for user config file (for testing).
                If not provided, uses PLAINVALUE_CONFIG_DIR env var or default XDG path.
            builtin_config_path: Override path for builtin defaults (for testing).
                If not provided, uses the bundled defaults/config.yaml.
        """
        super().__init__(settings_cls)
        self._project_root = project_root
        self._user_config_path = user_config_path
        self._builtin_config_path = builtin_config_path
        # Layers that were actually loaded, lowest precedence first
        self._loaded_layers: list[tuple[str, _pathlib.Path]] = []
        self._merged = self._load_config_layers()

    def _load_config_layers(self) -> dict[str, _typing.Any]:
        """
        Load config files and merge them.

        Returns:
            Merged configuration dict.
        """
        layers: list[dict[str, _typing.Any]] = []

        # Layer 1: Built-in defaults (lowest precedence) (REQUIRED)
        builtin_path = self._get_builtin_config_path()
        if not builtin_path.exists():
            raise ConfigFileError(
                builtin_path,
                "built-in defaults not found (possible installation problem)",
            )
        builtin_content = self._load_yaml_file(builtin_path)
        if not builtin_content:
            raise ConfigFileError(
                builtin_path,
                "built-in defaults file is empty (possible installation problem)",
            )
        layers.append(builtin_content)
        self._loaded_layers.append(("built-in", builtin_path))

        # Layer 2: User config (OPTIONAL)
        user_path = self._get_user_config_path()
        if user_path.exists():
            content = self._load_yaml_file(user_path)
            if content:
                layers.append(content)
                self._loaded_layers.append(("user", user_path))

        # Layer 3: Project config (OPTIONAL)
        if self._project_root:
            project_path = get_project_config_path(self._project_root)
            if project_path.exists():
                content = self._load_yaml_file(project_path)
                if content:
                    layers.append(content)
                    self._loaded_layers.append(("project", project_path))

        _logger.debug(
            "Loaded config layers: %s",
            ", ".join(f"{name}={path}" for name, path in self._loaded_layers),
        )
        return traversal.deep_merge(*layers)

    def _get_builtin_config_path(self) -> _pathlib.Path:
        """Get path to builtin defaults, respecting override."""
        if self._builtin_config_path is not None:
            return self._builtin_config_path
        return get_builtin_defaults_path()

    def _get_user_config_path(self) -> _pathlib.Path:
        """Get path to user config, respecting override and env var."""
        if self._user_config_path is not None:
            return self._user_config_path
        return get_user_config_path()

    def _load_yaml_file(
        self,
        path: _pathlib.Path,
    ) -> dict[str, _typing.Any] | None:
        """
        Load a YAML file and return its contents as a dict.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed YAML contents, or None if file is empty.

        Raises:
            ConfigFileError: If the file cannot be read, is malformed YAML,
                or contains non-dict content at the top level.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except PermissionError as e:
            raise ConfigFileError(path, f"permission denied: {e}") from e
        except OSError as e:
            raise ConfigFileError(path, f"cannot read file: {e}") from e

        try:
            parsed = _yaml.safe_load(content)
        except _yaml.YAMLError as e:
            raise ConfigFileError(path, f"invalid YAML: {e}") from e

        if parsed is None:
            return None

        if not isinstance(parsed, dict):
            type_name = type(parsed).__name__
            raise ConfigFileError(
                path,
                f"config must be a YAML mapping (dict), got {type_name}",
            )

        return parsed

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """
        Get value for a field from the merged layers.

        Returns:
            Tuple of (value, field_name, is_complex).
            is_complex is True if the value is a dict or list.
        """
        value = self._merged.get(field_name)
        if value is None:
            return None, field_name, False
        return value, field_name, isinstance(value, (_abc.Mapping, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """
        Return merged config as a plain dict for Pydantic validation.

        This returns the FULL merged config, including unknown keys, so
        they are kept in model_extra.
        """
        return traversal.deep_clone(self._merged)


def get_builtin_defaults_path() -> _pathlib.Path:
    """
    Get the path to the built-in defaults config file.

    Returns:
        Path to defaults/config.yaml.
    """
    return _pathlib.Path(__file__).parent / "defaults" / CONFIG_FILENAME


def get_user_config_dir() -> _pathlib.Path:
    """
    Get the user config directory.

    Respects PLAINVALUE_CONFIG_DIR environment variable if set,
    otherwise uses XDG standard path.
    """
    config_dir_env = _os.environ.get(ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env)
    return _pathlib.Path.home() / ".config" / "plainvalue"


def get_user_config_path() -> _pathlib.Path:
    """Get the path to the user config file."""
    return get_user_config_dir() / CONFIG_FILENAME


def get_project_config_path(project_root: _pathlib.Path) -> _pathlib.Path:
    """
    Get the path to the project config file.

    Args:
        project_root: The project root directory.

    Returns:
        Path to .plainvalue/config.yaml within the project.
    """
    return project_root / PROJECT_CONFIG_DIRNAME / CONFIG_FILENAME
