"""Scalar and structure helpers for KittyLib.

Small single-purpose transforms that sit around the traversal core:
slugs, templates, ordinals, UUIDs, merging, upserting and path lookups.
"""

from .strings import slugify, format_template, PLACEHOLDER_PATTERN
from .numbers import ordinal
from .identifiers import generate_uuid, is_uuid, UUID4_PATTERN
from .structures import immutable_merge, upsert, matches
from .accessors import (
    get_path,
    get_string,
    get_number,
    get_boolean,
    get_sequence,
    get_mapping,
)

__all__ = [
    'slugify',
    'format_template',
    'PLACEHOLDER_PATTERN',
    'ordinal',
    'generate_uuid',
    'is_uuid',
    'UUID4_PATTERN',
    'immutable_merge',
    'upsert',
    'matches',
    'get_path',
    'get_string',
    'get_number',
    'get_boolean',
    'get_sequence',
    'get_mapping',
]
