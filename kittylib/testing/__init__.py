"""Testing utilities for KittyLib consumers."""

from .fixtures import (
    CallRecorder,
    make_self_referencing,
    make_shared_reference_tree,
    make_nested,
    leaf_paths,
)

__all__ = [
    'CallRecorder',
    'make_self_referencing',
    'make_shared_reference_tree',
    'make_nested',
    'leaf_paths',
]
