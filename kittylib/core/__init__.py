"""Core traversal components for KittyLib.

This package contains the node classification, the ValueAdapter and the
three recursive traversal algorithms built on them.
"""

from .node import NodeKind
from .adapter import ValueAdapter
from .path import join_path, split_path
from .operation import TreeOperation
from .mapper import TreeMapper
from .filter import TreeFilter
from .compactor import TreeCompactor

__all__ = [
    "NodeKind",
    "ValueAdapter",
    "join_path",
    "split_path",
    "TreeOperation",
    "TreeMapper",
    "TreeFilter",
    "TreeCompactor",
]
