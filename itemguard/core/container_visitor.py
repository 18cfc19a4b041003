# itemguard/core/container_visitor.py
"""
Aggregate size of a container's contents.
"""
from typing import Any, Optional

from itemguard.config import GUARD_DEFAULT_RECURSION_DEPTH, GUARD_LOG_SOURCE
from itemguard.core.size_evaluator import SizeEvaluator
from itemguard.items.container import Container
from itemguard.items.item import Item
from itemguard.utils.logger import Logger


class ContainerRecursionVisitor:
    """
    Sums the sizes of every occupied slot of a container.

    With max_depth=1 each contained item is measured as a simple item, including
    containers inside the container (their own contents are not visited). A larger
    max_depth also adds the contents of nested containers, down to that many levels.
    """

    def __init__(self, evaluator: Optional[SizeEvaluator] = None,
                 max_depth: int = GUARD_DEFAULT_RECURSION_DEPTH):
        self.evaluator = evaluator or SizeEvaluator()
        self.max_depth = max(1, int(max_depth))

    def get_snapshot(self, container: Container) -> Optional[list]:
        """Nested slots of the container, or None when the container state is unusable."""
        accessor = getattr(container, "get_contents", None)
        if not callable(accessor):
            return None
        contents: Any = accessor()
        if isinstance(contents, tuple):
            contents = list(contents)
        if not isinstance(contents, list):
            return None
        return contents

    def aggregate_size(self, container: Container) -> Optional[int]:
        """Total size of the container's contents, or None if the container is malformed."""
        return self._aggregate(container, 1)

    def _aggregate(self, container: Container, depth: int) -> Optional[int]:
        contents = self.get_snapshot(container)
        if contents is None:
            return None

        total = 0
        for entry in contents:
            if entry is None:
                continue
            if not isinstance(entry, Item):
                Logger.debug(GUARD_LOG_SOURCE, f"Skipping non-item entry {type(entry).__name__} in {container!r}.")
                continue

            total += self.evaluator.measure(entry)

            if isinstance(entry, Container) and depth < self.max_depth:
                nested = self._aggregate(entry, depth + 1)
                if nested is None:
                    Logger.warning(GUARD_LOG_SOURCE, f"Nested container {entry!r} has no usable contents.")
                else:
                    total += nested
        return total
