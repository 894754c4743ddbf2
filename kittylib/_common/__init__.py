"""Common components shared between the traversal core and the helpers.

This internal package contains pure computation used by more than one
public module. It should NOT be imported directly by users.

Important: This package must NEVER import from core or helpers to avoid
circular dependencies.
"""

from .truthiness import is_falsy, is_truthy

__all__ = [
    'is_falsy',
    'is_truthy',
]
