"""Number helpers."""

import math
from numbers import Real
from typing import Optional

from ..errors import StructureTypeError
from ..policies import ErrorPolicy, resolve_policy

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(number: Real, strict: bool = False, policy: Optional[ErrorPolicy] = None) -> str:
    """Return the English ordinal suffix of a number.

    The absolute value is floored, so the sign never changes the suffix.
    Anything ending in 11, 12 or 13 takes "th".

    Args:
        number: The number under test
        strict: Raise StructureTypeError for non-numbers, NaN and infinities
        policy: Explicit error policy (overrides ``strict``)

    Returns:
        One of "st", "nd", "rd", "th"

    Example:
        >>> ordinal(142)
        'nd'
    """
    if isinstance(number, bool) or not isinstance(number, Real) or not math.isfinite(number):
        error = StructureTypeError(f"ordinal expects a finite number, got {number!r}")
        return resolve_policy(policy, strict).handle(error, "ordinal", number, "th")

    value = math.floor(abs(number))
    if value % 100 // 10 == 1:
        return "th"
    return _SUFFIXES.get(value % 10, "th")
