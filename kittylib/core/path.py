"""Property path construction.

A property path identifies a value's location from the traversal root as
a dot-joined string of keys and indices, e.g. ``"a.b.0.c"``. The root path
is the empty string and there is never a leading dot.
"""

from typing import Any, List, Sequence, Union

PATH_SEPARATOR = "."

PathLike = Union[str, Sequence[Any]]


def join_path(parent: str, key: Any) -> str:
    """Extend a path by one segment.

    Args:
        parent: Path of the containing value ("" for the root)
        key: Mapping key or sequence index of the child

    Returns:
        The child's path
    """
    segment = str(key)
    return f"{parent}{PATH_SEPARATOR}{segment}" if parent else segment


def split_path(path: PathLike) -> List[str]:
    """Turn a path into its list of segments.

    Strings are split on the separator (the empty string is the root and
    has no segments); any other sequence is taken as segments already.
    """
    if isinstance(path, str):
        return path.split(PATH_SEPARATOR) if path else []
    return [str(segment) for segment in path]
