"""Error types raised by KittyLib.

Every function in the library is permissive by default and degrades bad
input to a sensible fallback. These exceptions only surface when a caller
opts into strict validation (``strict=True`` or a ``FailFastPolicy``), or
when a configuration object is invalid.
"""


class KittyError(Exception):
    """Base class for all KittyLib errors."""
    pass


class StructureTypeError(KittyError, TypeError):
    """Raised when a value is not of the kind an operation expects.

    Examples: a leaf passed where a container is required, a non-string
    passed to ``slugify``, a non-number passed to ``ordinal``.
    """
    pass


class CycleError(KittyError, ValueError):
    """Raised when a container re-enters its own ancestry during traversal."""

    def __init__(self, path: str):
        self.path = path
        where = repr(path) if path else "the root"
        super().__init__(f"Cycle detected at {where}")


class TemplateKeyError(KittyError, KeyError):
    """Raised when a template placeholder has no substitution value."""

    def __init__(self, placeholder: str):
        self.placeholder = placeholder
        super().__init__(placeholder)

    def __str__(self) -> str:
        return f"No value supplied for placeholder {{{self.placeholder}}}"


class ConfigurationError(KittyError, ValueError):
    """Raised when a configuration or call signature cannot be satisfied."""
    pass
