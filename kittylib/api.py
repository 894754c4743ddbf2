"""High-level API for KittyLib.

This module provides the simple, functional interface to the library. The
traversal functions wrap the object-oriented core (TreeMapper, TreeFilter,
TreeCompactor) for ease of use; the helpers are re-exported as they are.
"""

from typing import Any, Callable, Iterable, List, Optional, Type

from .config import CompactConfig, TraversalConfig, ValidationMode
from .core.compactor import TreeCompactor
from .core.filter import TreeFilter
from .core.mapper import TreeMapper
from .policies import ErrorPolicy
from .helpers.strings import slugify, format_template
from .helpers.numbers import ordinal
from .helpers.identifiers import generate_uuid, is_uuid
from .helpers.structures import immutable_merge, upsert, matches
from .helpers.accessors import (
    get_path,
    get_string,
    get_number,
    get_boolean,
    get_sequence,
    get_mapping,
)


def deep_map_values(
    value: Any,
    callback: Callable[[Any, str], Any],
    strict: bool = False,
    max_depth: Optional[int] = None,
    leaf_types: Iterable[Type] = (),
    policy: Optional[ErrorPolicy] = None,
    config: Optional[TraversalConfig] = None,
) -> Any:
    """Map all leaf values in a tree, keeping its structure.

    Args:
        value: The structure to map
        callback: Function(leaf, path) called once per leaf; ``path`` is the
            dot-joined property path of the leaf (``"a.b.0.c"``)
        strict: Detect cycles and raise CycleError
        max_depth: Containers at this depth are handed to the callback whole
        leaf_types: Extra types never decomposed
        policy: Error policy for detected problems (overrides ``strict``)
        config: Complete TraversalConfig (overrides all other options)

    Returns:
        New structure of the same shape with mapped leaves

    Example:
        >>> deep_map_values({'a': 1, 'b': {'c': 2}}, lambda v, p: v * 10)
        {'a': 10, 'b': {'c': 20}}
    """
    if config is None:
        config = _build_config(TraversalConfig, strict, max_depth, leaf_types, policy)
    return TreeMapper(config).map(value, callback)


def filter_deep(
    collection: Any,
    predicate: Optional[Callable[[Any], Any]] = None,
    strict: bool = False,
    max_depth: Optional[int] = None,
    leaf_types: Iterable[Type] = (),
    policy: Optional[ErrorPolicy] = None,
    config: Optional[TraversalConfig] = None,
) -> List[Any]:
    """Collect every value, at any depth, that satisfies a predicate.

    Args:
        collection: The structure to search
        predicate: Function(value) -> truthy to keep; defaults to the
            value's own truthiness
        strict: Raise StructureTypeError when ``collection`` is a leaf
        max_depth: Containers at this depth are tested but not expanded
        leaf_types: Extra types never decomposed
        policy: Error policy for detected problems (overrides ``strict``)
        config: Complete TraversalConfig (overrides all other options)

    Returns:
        Flat list of matching values

    Example:
        >>> filter_deep([{'a': 1}, {'a': 2}], lambda v: v == 1)
        [1]
    """
    if config is None:
        config = _build_config(TraversalConfig, strict, max_depth, leaf_types, policy)
    return TreeFilter(config).filter(collection, predicate)


def compact_object(
    obj: Any,
    deep: bool = False,
    strict: bool = False,
    keep_empty_containers: bool = False,
    max_depth: Optional[int] = None,
    leaf_types: Iterable[Type] = (),
    policy: Optional[ErrorPolicy] = None,
    config: Optional[CompactConfig] = None,
) -> Any:
    """Remove falsy-valued properties from a clone of ``obj``.

    Falsy values are ``None``, ``False``, numeric zero, ``NaN`` and ``""``.
    Containers are only dropped in deep mode, when they are empty.

    Args:
        obj: The mapping or sequence to compact
        deep: Compact nested containers too
        strict: Raise StructureTypeError for leaves and CycleError for cycles
        keep_empty_containers: In deep mode, keep containers even when
            they are empty after compaction
        max_depth: Containers at this depth are left untouched
        leaf_types: Extra types never decomposed
        policy: Error policy for detected problems (overrides ``strict``)
        config: Complete CompactConfig (overrides all other options)

    Returns:
        The compacted clone

    Example:
        >>> compact_object({'a': False, 'b': 3, 'c': ''})
        {'b': 3}
    """
    if config is None:
        config = _build_config(CompactConfig, strict, max_depth, leaf_types, policy)
        config.deep = deep
        config.keep_empty_containers = keep_empty_containers
    return TreeCompactor(config).compact(obj)


# Short aliases matching the classic utility-belt names
format = format_template
uuid = generate_uuid


# Helper functions

def _build_config(config_class, strict, max_depth, leaf_types, policy) -> TraversalConfig:
    """Build a config from keyword arguments.

    Returns:
        Instance of ``config_class``
    """
    return config_class(
        mode=ValidationMode.STRICT if strict else ValidationMode.PERMISSIVE,
        policy=policy,
        max_depth=max_depth,
        leaf_types=tuple(leaf_types),
    )


__all__ = [
    'deep_map_values',
    'filter_deep',
    'compact_object',
    'slugify',
    'format',
    'format_template',
    'ordinal',
    'uuid',
    'generate_uuid',
    'is_uuid',
    'immutable_merge',
    'upsert',
    'matches',
    'get_path',
    'get_string',
    'get_number',
    'get_boolean',
    'get_sequence',
    'get_mapping',
]
