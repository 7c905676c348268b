"""Read-only tree traversal for treeiter.

TreeIter walks one or more trees without touching them. Each call to
next() dequeues exactly one node from the frontier and feeds that node's
children back in according to the traversal order.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterable, Iterator, Optional, Union

from ..config import TraversalConfig, TraversalOrder
from ..errors import ConfigurationError
from .adapter import TreeAdapter, as_adapter

logger = logging.getLogger(__name__)


def _resolve(order: Optional[Union[TraversalOrder, str]],
             adapter: Any,
             config: Optional[TraversalConfig]):
    """Merge explicit engine arguments with a TraversalConfig.

    Returns:
        Tuple of (config, order, adapter)

    Raises:
        ConfigurationError: If the config fails validation
    """
    if config is None:
        config = TraversalConfig()
    else:
        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    resolved_order = TraversalOrder.parse(order if order is not None else config.order)
    resolved_adapter = as_adapter(adapter if adapter is not None else config.adapter)
    return config, resolved_order, resolved_adapter


class TreeIter:
    """Lazy read-only traversal over a forest of trees.

    Breadth-first yields nodes level by level, all roots sharing depth 0.
    Depth-first yields each root's subtree in pre-order before moving on
    to the next root.

    Example:
        >>> for node in TreeIter([root], order="dfs"):
        ...     print(node.value)
    """

    def __init__(self,
                 roots: Iterable[Any],
                 order: Optional[Union[TraversalOrder, str]] = None,
                 adapter: Any = None,
                 config: Optional[TraversalConfig] = None):
        """Create a traversal seeded with roots.

        Args:
            roots: Root nodes, traversed as one forest in the given order.
                An empty collection gives an already exhausted iterator.
            order: Traversal order; overrides config.order
            adapter: TreeAdapter or children callable; overrides config.adapter
            config: Optional TraversalConfig
        """
        self.config, self._order, self._adapter = _resolve(order, adapter, config)
        self._frontier: Deque[Any] = deque(roots)
        self._visited = 0
        logger.debug("TreeIter created: order=%s roots=%d adapter=%r",
                     self._order.name, len(self._frontier), self._adapter)

    @classmethod
    def from_root(cls, root: Any, **kwargs) -> 'TreeIter':
        """Create a traversal over a single tree."""
        return cls([root], **kwargs)

    @property
    def order(self) -> TraversalOrder:
        return self._order

    @property
    def adapter(self) -> TreeAdapter:
        return self._adapter

    @property
    def pending(self) -> int:
        """Number of discovered nodes not yet yielded."""
        return len(self._frontier)

    @property
    def visited(self) -> int:
        """Number of nodes yielded so far."""
        return self._visited

    @property
    def exhausted(self) -> bool:
        return not self._frontier

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._frontier:
            raise StopIteration

        node = self._frontier.popleft()
        self._order.enqueue(self._frontier, self._adapter.get_children(node))
        self._visited += 1

        if not self._frontier:
            logger.debug("TreeIter exhausted after %d nodes", self._visited)
        return node

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(order={self._order.name}, "
                f"pending={self.pending}, visited={self._visited})")
