"""Falsy-property compaction for KittyLib.

TreeCompactor removes properties whose values are falsy from a deep clone
of its input. The input itself is never modified.
"""

import copy
from collections.abc import MutableMapping
from typing import Any, List, Tuple

from .._common import is_falsy
from ..config import CompactConfig
from ..errors import CycleError, StructureTypeError
from .operation import TreeOperation
from .path import join_path


class TreeCompactor(TreeOperation):
    """Drops falsy-valued properties from a cloned structure.

    Falsy means ``None``, ``False``, numeric zero, ``NaN`` or ``""``;
    containers are never falsy. Shallow mode only looks at the top-level
    container. Deep mode compacts nested containers first and then drops
    every container that is empty afterwards, whether it was emptied by
    compaction or was empty to begin with. Set ``keep_empty_containers``
    to keep every container regardless.

    Sequence elements are properties too; falsy elements are removed and
    the remaining ones close up.

    The clone is compacted in place where it is mutable (dicts and lists
    keep their type and identity), so a cyclic edge in the input comes
    back as a cyclic edge onto the compacted container. Immutable
    containers such as tuples are rebuilt.
    """

    operation_name = "compact_object"
    config_class = CompactConfig

    def __init__(self, config=None, adapter=None):
        super().__init__(config, adapter)
        self.deep = getattr(self.config, 'deep', False)
        self.keep_empty_containers = getattr(self.config, 'keep_empty_containers', False)

    def compact(self, value: Any) -> Any:
        """Return a compacted deep clone of ``value``.

        Args:
            value: Mapping or sequence to compact

        Returns:
            The compacted clone; a non-container comes back as a plain clone
        """
        clone = copy.deepcopy(value)

        if not self.adapter.is_container(clone):
            error = StructureTypeError(
                f"compact_object expects a mapping or sequence, got {type(value).__name__}"
            )
            return self._report(error, value, clone)

        if self.deep:
            return self._compact_deep(clone, "", 0, ())
        return self._compact_level(clone)

    def _compact_level(self, container: Any) -> Any:
        kept = [
            (key, child)
            for key, child in self.adapter.get_children(container)
            if not is_falsy(child)
        ]
        return self._replace_children(container, kept)

    def _compact_deep(self,
                      container: Any,
                      path: str,
                      depth: int,
                      ancestry: Tuple[int, ...]) -> Any:
        if id(container) in ancestry:
            # the ancestor is compacted in place once its own children are done
            return self._report(CycleError(path), container, container)
        ancestry = ancestry + (id(container),)

        kept = []
        for key, child in self.adapter.get_children(container):
            if self.adapter.is_container(child):
                if self.config.should_expand(depth + 1):
                    child = self._compact_deep(child, join_path(path, key), depth + 1, ancestry)
                if self.keep_empty_containers or len(child) > 0:
                    kept.append((key, child))
            elif not is_falsy(child):
                kept.append((key, child))
        return self._replace_children(container, kept)

    def _replace_children(self, container: Any, kept: List[Tuple[Any, Any]]) -> Any:
        if isinstance(container, MutableMapping):
            container.clear()
            container.update(kept)
            return container
        if isinstance(container, list):
            container[:] = [child for _, child in kept]
            return container
        return self.adapter.rebuild(container, kept)
