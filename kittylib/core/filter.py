"""Deep predicate filtering for KittyLib.

TreeFilter collects every value, at every depth, that satisfies a predicate.
The predicate sees each property value of every expanded container, so a
container and its own matching descendants can both appear in the result.
"""

from typing import Any, Callable, List, Optional, Tuple

from .._common import is_truthy
from ..errors import StructureTypeError
from .operation import TreeOperation

Predicate = Callable[[Any], Any]


class TreeFilter(TreeOperation):
    """Collects all values in a tree that satisfy a predicate.

    The input is wrapped in a synthetic root mapping so that the collection
    itself is tested like any other value. For each expanded container the
    matching child values are emitted first, in iteration order, followed by
    the results of expanding each child container in turn.

    A child container is not expanded again if it is already on the current
    recursion path (the ancestry chain, including the container being
    expanded). This terminates on cycles without a global visited set: a
    container reached through two separate branches is expanded once per
    branch.
    """

    operation_name = "filter_deep"

    # Key of the synthetic root wrapping the input
    ROOT_KEY = "parent"

    def filter(self, collection: Any, predicate: Optional[Predicate] = None) -> List[Any]:
        """Filter ``collection`` deeply.

        Args:
            collection: Structure to search
            predicate: Function(value) -> truthy to keep; defaults to
                truthiness of the value itself

        Returns:
            Flat list of matching values in visit order
        """
        if predicate is None:
            predicate = is_truthy

        if not self.adapter.is_container(collection):
            error = StructureTypeError(
                f"filter_deep expects a mapping or sequence, got {type(collection).__name__}"
            )
            self._report(error, collection)

        results: List[Any] = []
        root = {self.ROOT_KEY: collection}
        self._collect(root, predicate, -1, (), results)
        return results

    def _collect(self,
                 container: Any,
                 predicate: Predicate,
                 depth: int,
                 ancestry: Tuple[int, ...],
                 results: List[Any]) -> None:
        children = [child for _, child in self.adapter.get_children(container)]

        for child in children:
            if is_truthy(predicate(child)):
                results.append(child)

        chain = ancestry + (id(container),)
        child_depth = depth + 1
        for child in children:
            if not self.adapter.is_container(child):
                continue
            if id(child) in chain:
                continue
            if not self.config.should_expand(child_depth):
                continue
            self._collect(child, predicate, child_depth, chain, results)
