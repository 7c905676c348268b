"""Mutating tree traversal for treeiter.

TreeMutIter hands out one TreeCursor per node. A node's children are not
read when the node is dequeued but when its cursor is released, so any
edit made through the cursor (new children, removed children, reordered
children) decides what gets visited next.

Only one cursor per engine may be live at a time. Requesting the next
cursor releases the current one, unless the engine was configured with
auto_release=False, in which case it is an error.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional, Union

from ..config import TraversalConfig, TraversalOrder
from ..errors import CursorActiveError, CursorError, CursorReleasedError
from .adapter import TreeAdapter
from .iter import _resolve

logger = logging.getLogger(__name__)


class TreeCursor:
    """Exclusive handle on the node currently being visited.

    Attribute reads and writes are forwarded to the node, so
    ``cursor.value += 1`` updates the node itself. The bound node is also
    available as ``cursor.node``.

    Releasing the cursor enqueues the node's children as they stand at
    that moment. After release every access raises CursorReleasedError.

    The cursor's own members (``node``, ``released``, ``release``) shadow
    node attributes of the same name; reach those through
    ``cursor.node.<name>``. Cursors cannot be copied or pickled.
    """

    __slots__ = ('_engine', '_node', '_released')

    def __init__(self, engine: 'TreeMutIter', node: Any):
        object.__setattr__(self, '_engine', engine)
        object.__setattr__(self, '_node', node)
        object.__setattr__(self, '_released', False)

    @property
    def node(self) -> Any:
        if self._released:
            raise CursorReleasedError("Cursor was already released; its node is no longer accessible")
        return self._node

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Finish the visit and enqueue the node's current children.

        Raises:
            CursorReleasedError: If the cursor was already released
        """
        if self._released:
            logger.warning("Release of an already released cursor")
            raise CursorReleasedError("Cursor was already released")
        self._engine._release(self)

    def _invalidate(self) -> None:
        object.__setattr__(self, '_released', True)
        object.__setattr__(self, '_node', None)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the cursor itself
        if name.startswith('__') or name in TreeCursor.__slots__:
            raise AttributeError(name)
        return getattr(self.node, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in TreeCursor.__slots__:
            object.__setattr__(self, name, value)
        else:
            setattr(self.node, name, value)

    def __reduce_ex__(self, protocol):
        raise CursorError("A TreeCursor is bound to its engine and cannot be copied or pickled")

    def __enter__(self) -> 'TreeCursor':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self._released:
            self.release()
        return None

    def __repr__(self) -> str:
        if self._released:
            return f"{self.__class__.__name__}(released)"
        return f"{self.__class__.__name__}(node={self._node!r})"


class TreeMutIter:
    """Lazy mutating traversal over a forest of trees.

    Example:
        >>> engine = TreeMutIter([root], order="dfs")
        >>> while (cursor := engine.step()) is not None:
        ...     cursor.value *= 2
        ...     cursor.release()

    Iterating the engine yields cursors; each one is released when the
    next is requested:

        >>> for cursor in TreeMutIter([root]):
        ...     cursor.value += 10
    """

    def __init__(self,
                 roots: Iterable[Any],
                 order: Optional[Union[TraversalOrder, str]] = None,
                 adapter: Any = None,
                 config: Optional[TraversalConfig] = None):
        """Create a mutating traversal seeded with roots.

        Args:
            roots: Root nodes, traversed as one forest in the given order.
                An empty collection gives an already exhausted engine.
            order: Traversal order; overrides config.order
            adapter: TreeAdapter or children callable; overrides config.adapter
            config: Optional TraversalConfig
        """
        self.config, self._order, self._adapter = _resolve(order, adapter, config)
        self._frontier: Deque[Any] = deque(roots)
        self._live: Optional[TreeCursor] = None
        self._visited = 0
        logger.debug("TreeMutIter created: order=%s roots=%d auto_release=%s",
                     self._order.name, len(self._frontier), self.config.auto_release)

    @classmethod
    def from_root(cls, root: Any, **kwargs) -> 'TreeMutIter':
        """Create a mutating traversal over a single tree."""
        return cls([root], **kwargs)

    @property
    def order(self) -> TraversalOrder:
        return self._order

    @property
    def adapter(self) -> TreeAdapter:
        return self._adapter

    @property
    def current(self) -> Optional[TreeCursor]:
        """The live cursor, or None if no node is being visited."""
        return self._live

    @property
    def pending(self) -> int:
        """Number of discovered nodes not yet handed out.

        Children of the node under a live cursor are not counted until
        that cursor is released.
        """
        return len(self._frontier)

    @property
    def visited(self) -> int:
        """Number of cursors handed out so far."""
        return self._visited

    @property
    def exhausted(self) -> bool:
        return self._live is None and not self._frontier

    def step(self) -> Optional[TreeCursor]:
        """Hand out a cursor bound to the next node.

        A live cursor from the previous step is released first, so its
        node's children take part in choosing the next node.

        Returns:
            TreeCursor for the next node, or None when exhausted

        Raises:
            CursorActiveError: If a cursor is live and auto_release is off
        """
        if self._live is not None:
            if not self.config.auto_release:
                logger.warning("step() called while a cursor is live (auto_release disabled)")
                raise CursorActiveError(
                    "Previous cursor must be released before the next step"
                )
            logger.debug("Releasing live cursor before next step")
            self._live.release()

        if not self._frontier:
            return None

        node = self._frontier.popleft()
        cursor = TreeCursor(self, node)
        self._live = cursor
        self._visited += 1
        return cursor

    def step_with(self, visit: Callable[[Any], Any]) -> bool:
        """Visit the next node through a callback.

        visit(node) runs with exclusive access to the node; its children
        are enqueued after it returns. If visit raises, the cursor stays
        live and the exception propagates.

        Args:
            visit: Callable receiving the node

        Returns:
            True if a node was visited, False when exhausted
        """
        cursor = self.step()
        if cursor is None:
            return False
        visit(cursor.node)
        cursor.release()
        return True

    def close(self) -> None:
        """Stop the traversal, leaving remaining nodes unvisited.

        A live cursor is invalidated without enqueuing its children.
        """
        if self._live is not None:
            self._live._invalidate()
            self._live = None
        self._frontier.clear()
        logger.debug("TreeMutIter closed after %d nodes", self._visited)

    def _release(self, cursor: TreeCursor) -> None:
        if cursor is not self._live:
            raise CursorReleasedError("Cursor does not belong to the live step of this traversal")

        children = self._adapter.get_children_mut(cursor._node)
        self._order.enqueue(self._frontier, children)
        cursor._invalidate()
        self._live = None

        if not self._frontier:
            logger.debug("TreeMutIter exhausted after %d nodes", self._visited)

    def __iter__(self) -> Iterator[TreeCursor]:
        return self

    def __next__(self) -> TreeCursor:
        cursor = self.step()
        if cursor is None:
            raise StopIteration
        return cursor

    def __enter__(self) -> 'TreeMutIter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(order={self._order.name}, "
                f"pending={self.pending}, visited={self._visited}, "
                f"live={self._live is not None})")
