"""Configuration system for KittyLib.

This module defines how callers tune the traversal operations: how strictly
input is validated, which error policy handles bad input, how deep to
descend, and which extra types must be treated as opaque leaves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Type, TYPE_CHECKING

from .policies import ErrorPolicy, resolve_policy

if TYPE_CHECKING:
    from .core.adapter import ValueAdapter


class ValidationMode(Enum):
    """How operations react to input they cannot process.

    PERMISSIVE degrades bad input to a fallback (never raises).
    STRICT raises the matching KittyError subclass.
    """
    PERMISSIVE = "permissive"
    STRICT = "strict"


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    This is the primary way callers tune TreeMapper, TreeFilter and
    TreeCompactor. The core classes validate it on construction.
    """

    # Validation
    mode: ValidationMode = ValidationMode.PERMISSIVE
    policy: Optional[ErrorPolicy] = None  # Overrides the mode's default policy

    # Depth control (root = 0); containers at max_depth are not expanded
    max_depth: Optional[int] = None

    # Extra types that are never decomposed
    leaf_types: Tuple[Type, ...] = field(default_factory=tuple)

    @property
    def is_strict(self) -> bool:
        """True when running in STRICT mode."""
        return self.mode is ValidationMode.STRICT

    def should_expand(self, depth: int) -> bool:
        """Check if a container at this depth should be expanded.

        Args:
            depth: Depth of the container, root = 0

        Returns:
            True if its children should be visited
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth

    def resolve_policy(self) -> ErrorPolicy:
        """Return the explicit policy, or the default for the mode."""
        return resolve_policy(self.policy, self.is_strict)

    def create_adapter(self) -> 'ValueAdapter':
        """Build the ValueAdapter matching this configuration."""
        from .core.adapter import ValueAdapter
        return ValueAdapter(leaf_types=self.leaf_types)

    # Convenience constructors for common configurations

    @classmethod
    def strict(cls, **kwargs: Any) -> 'TraversalConfig':
        """Create a config that raises on malformed input.

        Returns:
            TraversalConfig in STRICT mode
        """
        return cls(mode=ValidationMode.STRICT, **kwargs)

    @classmethod
    def shallow(cls, max_depth: int = 1, **kwargs: Any) -> 'TraversalConfig':
        """Create a config that stops descending at ``max_depth``.

        Args:
            max_depth: How deep to expand (default 1 = root's children only)

        Returns:
            TraversalConfig with a depth limit
        """
        return cls(max_depth=max_depth, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, ValidationMode):
            errors.append(f"mode must be a ValidationMode, got {self.mode!r}")

        if self.policy is not None and not isinstance(self.policy, ErrorPolicy):
            errors.append("policy must be an ErrorPolicy instance")

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        for leaf_type in self.leaf_types:
            if not isinstance(leaf_type, type):
                errors.append(f"leaf_types entries must be types, got {leaf_type!r}")

        return errors


@dataclass
class CompactConfig(TraversalConfig):
    """Configuration for falsy-property compaction."""

    deep: bool = False                   # Recurse into nested containers
    keep_empty_containers: bool = False  # Keep containers emptied by compaction
