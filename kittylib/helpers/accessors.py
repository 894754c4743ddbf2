"""Path lookup and typed getters.

``get_path`` resolves the dot-paths produced by ``deep_map_values`` back to
values. The typed getters wrap it and fall back to a default whenever the
value found is missing or of the wrong type.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from ..core.adapter import ValueAdapter
from ..core.node import NodeKind
from ..core.path import PathLike, split_path

_ADAPTER = ValueAdapter()
_MISSING = object()


def get_path(value: Any, path: PathLike, default: Any = None) -> Any:
    """Resolve a property path.

    Args:
        value: Structure to look in
        path: Dot-joined path string (``"a.b.0"``) or sequence of segments;
            the empty path is the value itself
        default: Returned when any segment cannot be resolved

    Returns:
        The value at ``path``, or default

    Example:
        >>> get_path({'a': [{'b': 7}]}, 'a.0.b')
        7
    """
    current = value
    for segment in split_path(path):
        current = _ADAPTER.get_child(current, segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def get_string(value: Any, path: PathLike, default: str = "") -> str:
    """Get a string at ``path``, or ``default``."""
    found = get_path(value, path, _MISSING)
    return found if isinstance(found, str) else default


def get_number(value: Any, path: PathLike, default: Real = 0) -> Real:
    """Get a real number at ``path``, or ``default``. Booleans are not numbers."""
    found = get_path(value, path, _MISSING)
    if isinstance(found, Real) and not isinstance(found, bool):
        return found
    return default


def get_boolean(value: Any, path: PathLike, default: bool = False) -> bool:
    """Get a bool at ``path``, or ``default``."""
    found = get_path(value, path, _MISSING)
    return found if isinstance(found, bool) else default


def get_sequence(value: Any, path: PathLike, default: Optional[list] = None) -> Any:
    """Get a list or tuple at ``path``, or ``default`` (a new empty list)."""
    found = get_path(value, path, _MISSING)
    if found is not _MISSING and _ADAPTER.classify(found) is NodeKind.SEQUENCE:
        return found
    return [] if default is None else default


def get_mapping(value: Any, path: PathLike, default: Optional[dict] = None) -> Any:
    """Get a mapping at ``path``, or ``default`` (a new empty dict)."""
    found = get_path(value, path, _MISSING)
    if isinstance(found, Mapping):
        return found
    return {} if default is None else default
