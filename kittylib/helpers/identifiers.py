"""UUID helpers."""

import re
import uuid
from typing import Any

UUID4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def generate_uuid() -> str:
    """Generate an RFC 4122 version 4 UUID string.

    Example:
        >>> len(generate_uuid())
        36
    """
    return str(uuid.uuid4())


def is_uuid(value: Any) -> bool:
    """Validate a version 4 UUID string.

    Only the canonical 36-character hyphenated form is accepted, in either
    case. Non-string values are never valid.

    Args:
        value: The candidate under test

    Returns:
        True if ``value`` is a valid version 4 UUID string
    """
    if not isinstance(value, str):
        return False
    return UUID4_PATTERN.fullmatch(value) is not None
