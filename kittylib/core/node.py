"""Node classification for KittyLib.

Every value met during a traversal belongs to exactly one variant of a
closed set. The variant is decided once, at the boundary, by the
ValueAdapter; the traversal algorithms only ever branch on the NodeKind
they are handed.
"""

from enum import Enum


class NodeKind(Enum):
    """The closed set of node variants.

    LEAF values are never decomposed. SEQUENCE and MAPPING are the only
    traversable containers.
    """
    LEAF = "leaf"           # Primitives, dates, patterns, callables, objects
    SEQUENCE = "sequence"   # list / tuple, children keyed by index
    MAPPING = "mapping"     # Mapping, children keyed by key

    @property
    def is_container(self) -> bool:
        """True for SEQUENCE and MAPPING."""
        return self is not NodeKind.LEAF
