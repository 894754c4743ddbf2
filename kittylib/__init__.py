"""KittyLib - Value Manipulation Utilities.

KittyLib is a collection of independent helpers for plain Python values:
deep mapping, deep filtering and compaction of nested dicts/lists/tuples,
plus slugs, string templates, ordinals, UUIDs, immutable merge and upsert.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from kittylib import deep_map_values, filter_deep, compact_object

    deep_map_values({'a': [1, 2]}, lambda value, path: value * 2)
    filter_deep({'a': {'b': 1}}, lambda value: value == 1)
    compact_object({'a': 0, 'b': {'c': ''}}, deep=True)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every function is permissive by default and never raises on malformed
input; pass ``strict=True`` (or an ErrorPolicy) to be told about it.
"""

__version__ = "0.1.0"

from .api import (
    deep_map_values,
    filter_deep,
    compact_object,
    slugify,
    format,
    format_template,
    ordinal,
    uuid,
    generate_uuid,
    is_uuid,
    immutable_merge,
    upsert,
    matches,
    get_path,
    get_string,
    get_number,
    get_boolean,
    get_sequence,
    get_mapping,
)
from .config import TraversalConfig, CompactConfig, ValidationMode
from .core import NodeKind, ValueAdapter, TreeMapper, TreeFilter, TreeCompactor
from .errors import (
    KittyError,
    StructureTypeError,
    CycleError,
    TemplateKeyError,
    ConfigurationError,
)
from .policies import (
    ErrorPolicy,
    PermissivePolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ThresholdPolicy,
    create_policy,
)

__all__ = [
    "__version__",
    # API
    "deep_map_values",
    "filter_deep",
    "compact_object",
    "slugify",
    "format",
    "format_template",
    "ordinal",
    "uuid",
    "generate_uuid",
    "is_uuid",
    "immutable_merge",
    "upsert",
    "matches",
    "get_path",
    "get_string",
    "get_number",
    "get_boolean",
    "get_sequence",
    "get_mapping",
    # Config
    "TraversalConfig",
    "CompactConfig",
    "ValidationMode",
    # Core
    "NodeKind",
    "ValueAdapter",
    "TreeMapper",
    "TreeFilter",
    "TreeCompactor",
    # Errors
    "KittyError",
    "StructureTypeError",
    "CycleError",
    "TemplateKeyError",
    "ConfigurationError",
    # Policies
    "ErrorPolicy",
    "PermissivePolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    "ThresholdPolicy",
    "create_policy",
]
