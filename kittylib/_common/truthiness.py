"""Truthiness rules shared by the filter, compactor and matchers.

The falsy set is closed: ``None``, ``False``, numeric zero, ``NaN`` and
the empty string. Everything else is truthy, including empty containers
and empty bytes. Values are never converted with ``bool()``, so objects
with ambiguous truth values (array-likes) are simply truthy.
"""

from numbers import Number
from typing import Any


def is_falsy(value: Any) -> bool:
    """Check whether a value is falsy.

    Args:
        value: Any value

    Returns:
        True for None, False, 0, 0.0, NaN and ""
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number) and not isinstance(value, bool):
        # NaN is the only value unequal to itself
        return value == 0 or value != value
    return False


def is_truthy(value: Any) -> bool:
    """Inverse of :func:`is_falsy`."""
    return not is_falsy(value)
