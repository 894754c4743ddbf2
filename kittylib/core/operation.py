"""Base class for the traversal operations.

TreeOperation is the bridge between a TraversalConfig and execution. It
validates the config before any traversal begins, builds the ValueAdapter
and resolves the error policy the operation reports bad input to.
"""

from typing import Any, Optional

from ..config import TraversalConfig
from ..errors import ConfigurationError
from ..policies import ErrorPolicy
from .adapter import ValueAdapter


class TreeOperation:
    """Shared setup for TreeMapper, TreeFilter and TreeCompactor."""

    operation_name = "tree_operation"
    config_class = TraversalConfig

    def __init__(self,
                 config: Optional[TraversalConfig] = None,
                 adapter: Optional[ValueAdapter] = None):
        """Create and validate an operation.

        Args:
            config: Traversal configuration (defaults to a permissive one)
            adapter: ValueAdapter to use instead of the config's default

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else self.config_class()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.adapter = adapter if adapter is not None else self.config.create_adapter()
        self.policy: ErrorPolicy = self.config.resolve_policy()

    def _report(self, error: Exception, value: Any, default: Any = None) -> Any:
        """Hand an input problem to the policy and return its fallback."""
        return self.policy.handle(error, self.operation_name, value, default)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config!r})"
