"""Deep value mapping for KittyLib.

TreeMapper walks an arbitrary nested structure and produces a structurally
parallel copy in which every leaf has been replaced by the result of a
callback. Each container level is rebuilt; nothing below a leaf is cloned.
"""

from typing import Any, Callable, Tuple

from ..errors import CycleError
from .operation import TreeOperation
from .path import join_path

MapCallback = Callable[[Any, str], Any]


class TreeMapper(TreeOperation):
    """Maps every leaf of a tree through a callback.

    The callback is invoked exactly once per leaf as ``callback(value, path)``
    where ``path`` is the dot-joined property path from the root (``""`` for a
    root leaf). Mappings come back as dicts with the same keys in the same
    order, lists as lists and tuples as tuples.

    In permissive mode there is no cycle detection: a self-referential
    structure recurses until Python's recursion limit. With strict mode (or
    any explicit policy) the ancestry chain is tracked and a container that
    re-enters it is reported as a CycleError; a policy that continues gets
    the container copied by reference at that point.

    Example:
        >>> TreeMapper().map({'a': [1, 2]}, lambda v, p: f"{p}={v}")
        {'a': ['a.0=1', 'a.1=2']}
    """

    operation_name = "deep_map_values"

    def __init__(self, config=None, adapter=None):
        super().__init__(config, adapter)
        self._track_cycles = self.config.is_strict or self.config.policy is not None

    def map(self, value: Any, callback: MapCallback) -> Any:
        """Map all leaves of ``value``.

        Args:
            value: Any value; leaves are passed straight to the callback
            callback: Function(leaf, path) -> new leaf

        Returns:
            New structure of the same shape with mapped leaves
        """
        return self._map(value, callback, "", 0, ())

    def _map(self,
             value: Any,
             callback: MapCallback,
             path: str,
             depth: int,
             ancestry: Tuple[int, ...]) -> Any:
        kind = self.adapter.classify(value)
        if not kind.is_container or not self.config.should_expand(depth):
            return callback(value, path)

        if self._track_cycles:
            if id(value) in ancestry:
                return self._report(CycleError(path), value, value)
            ancestry = ancestry + (id(value),)

        mapped = [
            (key, self._map(child, callback, join_path(path, key), depth + 1, ancestry))
            for key, child in self.adapter.get_children(value, kind)
        ]
        return self.adapter.rebuild(value, mapped)
