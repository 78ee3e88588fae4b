"""Configuration type definitions for plainvalue settings.

This module defines the Pydantic models used to represent configuration
sections nested within the main Settings class:

- OutputConfig: format, indent, sort_keys, color
- LoggingConfig: level, format

Design decision: All types use `extra="allow"` to preserve unknown fields,
so `plainvalue config show` can point out typos in config files.
"""

import typing as _typing

import pydantic as _pydantic

import plainvalue.constants as constants
import plainvalue.traversal as traversal

OutputFormat: _typing.TypeAlias = _typing.Literal["yaml", "json"]
LogLevel: _typing.TypeAlias = _typing.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this config has any unrecognized fields."""
        return bool(self.collect_all_extra_fields())

    def collect_all_extra_fields(self, prefix: str = "") -> dict[str, _typing.Any]:
        """
        Collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"output.fromat": "json", "colour": True}
        """
        result = traversal.flatten_object(self.get_extra_fields(), prefix)
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, ConfigBase):
                nested_prefix = traversal.join_path([prefix, name]) if prefix else name
                result.update(value.collect_all_extra_fields(nested_prefix))
        return result


class OutputConfig(ConfigBase):
    """How the CLI renders documents."""

    format: OutputFormat = constants.DEFAULT_OUTPUT_FORMAT
    indent: int = _pydantic.Field(default=constants.DEFAULT_INDENT, ge=0)
    sort_keys: bool = False
    color: bool | None = None
    """None = auto-detect (color when stdout is a TTY and NO_COLOR is unset)."""


class LoggingConfig(ConfigBase):
    """Stdlib logging setup for the CLI."""

    level: LogLevel = constants.DEFAULT_LOG_LEVEL
    format: str = constants.DEFAULT_LOG_FORMAT

    @_pydantic.field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: _typing.Any) -> _typing.Any:
        if isinstance(value, str):
            return value.upper()
        return value
