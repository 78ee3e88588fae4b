"""
plainvalue - structural helpers for plain data.

Deep clone, merge, comparison, dotted-path access and flattening for
values built from scalars, lists and string-keyed dicts (the shapes
that JSON and YAML documents load into).
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("plainvalue")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "plainvalue Contributors"

from plainvalue.mappings import (  # noqa: E402
    defaults,
    filter_object,
    has,
    invert,
    is_empty,
    map_keys,
    map_values,
    omit,
    pick,
    remove_nullish,
    size,
)
from plainvalue.traversal import (  # noqa: E402
    InvalidArgumentError,
    Kind,
    deep_clone,
    deep_merge,
    flatten_object,
    get_all_keys,
    get_nested_value,
    has_path,
    is_equal,
    kind_of,
    set_nested_value,
    unflatten_object,
)

__all__ = [
    "__version__",
    "__version_info__",
    "InvalidArgumentError",
    "Kind",
    "deep_clone",
    "deep_merge",
    "defaults",
    "filter_object",
    "flatten_object",
    "get_all_keys",
    "get_nested_value",
    "has",
    "has_path",
    "invert",
    "is_empty",
    "is_equal",
    "kind_of",
    "map_keys",
    "map_values",
    "omit",
    "pick",
    "remove_nullish",
    "set_nested_value",
    "size",
    "unflatten_object",
]
