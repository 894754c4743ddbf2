"""ValueAdapter abstraction for KittyLib.

The ValueAdapter is the single place that knows what plain Python values
look like as trees. It classifies each value into a NodeKind, iterates a
container's children, and rebuilds containers of the same variant. The
traversal algorithms never inspect value types themselves.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional, Tuple, Type

from .node import NodeKind


class ValueAdapter:
    """Adapter for navigating nested dicts, lists and tuples.

    Classification rules, applied in order:

    - instances of ``leaf_types`` are LEAF
    - callables are LEAF, even when they are also mappings or sequences
    - any ``collections.abc.Mapping`` is MAPPING
    - ``list`` and ``tuple`` (and their subclasses) are SEQUENCE
    - everything else is LEAF: strings, bytes, numbers, None, dates,
      compiled patterns, sets, and arbitrary objects

    Subclass and override :meth:`classify` to widen or narrow the set, as
    long as :meth:`get_children` and :meth:`rebuild` agree with it.
    """

    def __init__(self, leaf_types: Iterable[Type] = ()):
        """Initialize adapter.

        Args:
            leaf_types: Extra types that must always be treated as leaves
        """
        self.leaf_types: Tuple[Type, ...] = tuple(leaf_types)

    def classify(self, value: Any) -> NodeKind:
        """Decide which variant a value belongs to."""
        if self.leaf_types and isinstance(value, self.leaf_types):
            return NodeKind.LEAF
        if callable(value):
            return NodeKind.LEAF
        if isinstance(value, Mapping):
            return NodeKind.MAPPING
        if isinstance(value, (list, tuple)):
            return NodeKind.SEQUENCE
        return NodeKind.LEAF

    def is_container(self, value: Any) -> bool:
        """Check if a value is a traversable container."""
        return self.classify(value).is_container

    def get_children(self, value: Any, kind: Optional[NodeKind] = None) -> Iterator[Tuple[Any, Any]]:
        """Iterate ``(key, child)`` pairs of a container.

        Mappings yield their keys in iteration order, sequences yield
        integer indices. Leaves have no children.

        Args:
            value: The container
            kind: Its NodeKind, when the caller already classified it

        Returns:
            Iterator of (key, child) tuples
        """
        if kind is None:
            kind = self.classify(value)
        if kind is NodeKind.MAPPING:
            return iter(list(value.items()))
        if kind is NodeKind.SEQUENCE:
            return enumerate(list(value))
        return iter(())

    def get_child(self, value: Any, segment: Any, default: Any = None) -> Any:
        """Look up one child by path segment.

        Segments arrive as strings when they come from a dot-path, so a
        mapping is tried with the segment itself first and then with its
        integer form; sequences accept non-negative integer segments only.

        Args:
            value: The container to look in
            segment: Key or index
            default: Returned when the child does not exist

        Returns:
            The child, or default
        """
        kind = self.classify(value)
        if kind is NodeKind.MAPPING:
            if segment in value:
                return value[segment]
            index = _as_index(segment)
            if index is not None and index in value:
                return value[index]
            return default
        if kind is NodeKind.SEQUENCE:
            index = _as_index(segment)
            if index is not None and index < len(value):
                return value[index]
        return default

    def rebuild(self, original: Any, items: Iterable[Tuple[Any, Any]]) -> Any:
        """Build a new container of the same variant as ``original``.

        Mappings become plain dicts. Lists become lists, tuples become
        tuples; a namedtuple keeps its type when the field count still
        matches.

        Args:
            original: Container whose variant to reproduce
            items: (key, child) pairs for the new container

        Returns:
            The new container
        """
        kind = self.classify(original)
        if kind is NodeKind.MAPPING:
            return dict(items)
        if kind is NodeKind.SEQUENCE:
            values = [child for _, child in items]
            if isinstance(original, list):
                return values
            if hasattr(original, '_fields') and len(values) == len(original):
                return type(original)._make(values)
            return tuple(values)
        raise TypeError(f"Cannot rebuild leaf value of type {type(original).__name__}")

    def __repr__(self) -> str:
        names = ', '.join(t.__name__ for t in self.leaf_types)
        return f"{self.__class__.__name__}(leaf_types=({names}))"


def _as_index(segment: Any) -> Optional[int]:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isascii() and segment.isdigit():
        return int(segment)
    return None
