"""Structure helpers: immutable merge, upsert, and element matchers."""

import copy
from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from .._common import is_truthy
from ..core.adapter import ValueAdapter
from ..core.node import NodeKind
from ..errors import StructureTypeError
from ..policies import ErrorPolicy, resolve_policy

_MISSING = object()
_ADAPTER = ValueAdapter()


def immutable_merge(src: Any, dest: Any, strict: bool = False,
                    policy: Optional[ErrorPolicy] = None) -> Any:
    """Merge two structures without mutating either.

    The result starts as a deep copy of ``src``; ``dest`` is then merged
    into it. Mappings merge key by key and sequences merge index by index,
    recursively. Anywhere else ``dest``'s value wins. Values taken from
    ``dest`` are deep-copied, so the result shares no containers with
    either input.

    Args:
        src: The source structure
        dest: The destination structure, whose values take precedence
        strict: Raise StructureTypeError when either side is not a container
        policy: Explicit error policy (overrides ``strict``)

    Returns:
        A new structure built from ``src`` and ``dest``

    Example:
        >>> src = {'a': 1, 'b': 2}
        >>> dest = {'c': 3, 'd': 4}
        >>> immutable_merge(src, dest)
        {'a': 1, 'b': 2, 'c': 3, 'd': 4}
    """
    if not (_ADAPTER.is_container(src) and _ADAPTER.is_container(dest)):
        error = StructureTypeError(
            f"immutable_merge expects two containers, got "
            f"{type(src).__name__} and {type(dest).__name__}"
        )
        if _ADAPTER.is_container(dest):
            fallback = copy.deepcopy(dest)
        else:
            fallback = copy.deepcopy(src)
        return resolve_policy(policy, strict).handle(error, "immutable_merge", dest, fallback)

    return _merge_value(copy.deepcopy(src), dest)


def _merge_value(target: Any, incoming: Any) -> Any:
    target_kind = _ADAPTER.classify(target)
    incoming_kind = _ADAPTER.classify(incoming)

    if target_kind is NodeKind.MAPPING and incoming_kind is NodeKind.MAPPING:
        merged = dict(target)
        for key, value in incoming.items():
            if key in merged:
                merged[key] = _merge_value(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    if target_kind is NodeKind.SEQUENCE and incoming_kind is NodeKind.SEQUENCE:
        merged = list(target)
        for index, value in enumerate(incoming):
            if index < len(merged):
                merged[index] = _merge_value(merged[index], value)
            else:
                merged.append(copy.deepcopy(value))
        return _ADAPTER.rebuild(target, enumerate(merged))

    return copy.deepcopy(incoming)


def upsert(base: Any, matcher: Any, replacement: Any, strict: bool = False,
           policy: Optional[ErrorPolicy] = None) -> List[Any]:
    """Replace the elements matching ``matcher`` with ``replacement``.

    Every element matching ``matcher`` is removed and ``replacement`` is
    appended once at the end, so the result is one element longer than
    ``base`` when nothing matched. ``base`` itself is not modified.

    Args:
        base: The sequence to act upon
        matcher: Anything accepted by :func:`matches`
        replacement: The element to insert
        strict: Raise StructureTypeError when ``base`` is not a sequence
        policy: Explicit error policy (overrides ``strict``)

    Returns:
        A new list

    Example:
        >>> base = [{'id': 1, 'data': 2}, {'id': 2, 'data': 3}, {'id': 3, 'data': {'nested': 4}}]
        >>> upsert(base, {'id': 3}, {'id': 3, 'data': 5})
        [{'id': 1, 'data': 2}, {'id': 2, 'data': 3}, {'id': 3, 'data': 5}]
    """
    if _ADAPTER.classify(base) is not NodeKind.SEQUENCE:
        error = StructureTypeError(f"upsert expects a list or tuple, got {type(base).__name__}")
        return resolve_policy(policy, strict).handle(error, "upsert", base, [replacement])

    is_match = matches(matcher)
    result = [element for element in base if not is_match(element)]
    result.append(replacement)
    return result


def matches(matcher: Any) -> Callable[[Any], bool]:
    """Build an element predicate from a matcher shorthand.

    - callable: used as the predicate (its result is judged for truthiness)
    - mapping: partial deep match; every key of the pattern must be present
      in the element with a matching value, nested mappings matching
      partially as well
    - str: the element's property of that name is truthy
    - 2-tuple ``(key, value)``: the element's property ``key`` matches ``value``
    - anything else: equality

    Properties are looked up as mapping keys, or as attributes on other
    objects.

    Args:
        matcher: The shorthand

    Returns:
        Function(element) -> bool
    """
    if callable(matcher):
        return lambda element: is_truthy(matcher(element))
    if isinstance(matcher, Mapping):
        return lambda element: _is_match(element, matcher)
    if isinstance(matcher, str):
        return lambda element: is_truthy(_property(element, matcher, None))
    if isinstance(matcher, tuple) and len(matcher) == 2:
        key, expected = matcher
        return lambda element: _is_match(_property(element, key, _MISSING), expected)
    return lambda element: element == matcher


def _property(element: Any, key: Any, default: Any) -> Any:
    if isinstance(element, Mapping):
        return element.get(key, default)
    if isinstance(key, str):
        return getattr(element, key, default)
    return default


def _is_match(actual: Any, expected: Any) -> bool:
    if actual is _MISSING:
        return False

    expected_kind = _ADAPTER.classify(expected)

    if expected_kind is NodeKind.MAPPING:
        if not isinstance(actual, Mapping):
            return False
        for key, value in expected.items():
            if key not in actual or not _is_match(actual[key], value):
                return False
        return True

    if expected_kind is NodeKind.SEQUENCE:
        if _ADAPTER.classify(actual) is not NodeKind.SEQUENCE:
            return False
        return all(
            any(_is_match(candidate, item) for candidate in actual)
            for item in expected
        )

    return actual == expected
