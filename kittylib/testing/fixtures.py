"""Test fixtures for KittyLib consumers.

These fixtures make the traversal contracts easy to assert in test suites:
recording callback invocations, and building the awkward structures
(self-references, shared references, deep nesting) traversals must survive.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple


class CallRecorder:
    """Callable that records every invocation before delegating.

    Wrap a mapping callback or filter predicate with it to check how often
    and with what arguments the traversal called it.

    Example:
        recorder = CallRecorder(lambda value, path: value)
        deep_map_values({'a': 1, 'b': [2]}, recorder)

        assert recorder.paths() == ['a', 'b.0']
        assert recorder.call_count == 2
    """

    def __init__(self, func: Optional[Callable[..., Any]] = None):
        """Initialize with the function to delegate to.

        Args:
            func: Function to call; defaults to returning the first argument
        """
        self._func = func or (lambda value, *rest: value)
        self.calls: List[Tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self._func(*args)

    @property
    def call_count(self) -> int:
        """Number of recorded calls."""
        return len(self.calls)

    def values(self) -> List[Any]:
        """First argument of every call, in call order."""
        return [args[0] for args in self.calls]

    def paths(self) -> List[str]:
        """Second argument of every call (the path for mapping callbacks)."""
        return [args[1] for args in self.calls if len(args) > 1]

    def calls_by_path(self) -> Dict[str, List[Any]]:
        """Group recorded values by path.

        Returns:
            Dictionary mapping each path to the list of values seen there;
            a path visited exactly once has a single-element list
        """
        grouped: Dict[str, List[Any]] = {}
        for args in self.calls:
            if len(args) > 1:
                grouped.setdefault(args[1], []).append(args[0])
        return grouped

    def reset(self) -> None:
        """Forget all recorded calls."""
        self.calls.clear()


def make_self_referencing(**values: Any) -> Dict[str, Any]:
    """Build a dict whose ``self`` key points back at the dict itself."""
    node: Dict[str, Any] = dict(values)
    node['self'] = node
    return node


def make_shared_reference_tree(shared: Any) -> Dict[str, Any]:
    """Build a tree where ``shared`` is reachable through two sibling branches."""
    return {
        'left': {'item': shared},
        'right': {'item': shared},
    }


def make_nested(depth: int, leaf: Any = None, key: str = 'child') -> Dict[str, Any]:
    """Build ``depth`` levels of single-key dicts ending in ``leaf``.

    Args:
        depth: Number of dict levels (>= 1)
        leaf: Value at the bottom
        key: Key used at every level

    Returns:
        The outermost dict
    """
    node: Any = leaf
    for _ in range(depth):
        node = {key: node}
    return node


def leaf_paths(structure: Any) -> List[str]:
    """List the leaf paths of an acyclic structure in traversal order."""
    from ..api import deep_map_values

    recorder = CallRecorder()
    deep_map_values(structure, recorder)
    return recorder.paths()
