"""
Structural traversal of plain values.

Recursive helpers over scalars, sequences and string-keyed mappings:
cloning, merging, comparing, dotted-path access, and flattening.

Example:
    >>> from plainvalue.traversal import deep_merge, flatten_object
    >>> merged = deep_merge({"server": {"host": "localhost"}}, {"server": {"port": 8080}})
    >>> merged
    {'server': {'host': 'localhost', 'port': 8080}}
    >>> flatten_object(merged)
    {'server.host': 'localhost', 'server.port': 8080}
"""

from plainvalue.traversal._clone import deep_clone
from plainvalue.traversal._equality import is_equal
from plainvalue.traversal._flatten import (
    flatten_object,
    get_all_keys,
    iter_leaves,
    unflatten_object,
)
from plainvalue.traversal._merge import deep_merge
from plainvalue.traversal._paths import (
    get_nested_value,
    has_path,
    join_path,
    set_nested_value,
    split_path,
)
from plainvalue.traversal._types import (
    InvalidArgumentError,
    Kind,
    Path,
    is_mapping,
    is_sequence,
    kind_of,
)

__all__ = [
    "InvalidArgumentError",
    "Kind",
    "Path",
    "deep_clone",
    "deep_merge",
    "flatten_object",
    "get_all_keys",
    "get_nested_value",
    "has_path",
    "is_equal",
    "is_mapping",
    "is_sequence",
    "iter_leaves",
    "join_path",
    "kind_of",
    "set_nested_value",
    "split_path",
    "unflatten_object",
]
