"""Node capability contracts for treeiter.

A node type takes part in traversal by exposing its immediate children.
That is the whole contract: no identifiers, no parent links, no metadata.
Any class with the right method can be traversed; inheriting from
TraversableMixin only adds the convenience iter()/iter_mut() entry points.
"""

from typing import TYPE_CHECKING, Any, Iterable, MutableSequence, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from ..config import TraversalOrder
    from .iter import TreeIter
    from .iter_mut import TreeMutIter


@runtime_checkable
class SupportsChildren(Protocol):
    """Read-only children access.

    get_children() must return the node's immediate children in their
    stable order. A reversible sequence (list, tuple) is preferred; any
    other iterable is materialised into a list for depth-first traversal.
    The engine never mutates what is returned.
    """

    def get_children(self) -> Iterable[Any]:
        ...


@runtime_checkable
class SupportsChildrenMut(Protocol):
    """Mutable children access.

    get_children_mut() must return the live child collection, so that
    edits made while the node is under a cursor are seen when the cursor
    is released.
    """

    def get_children_mut(self) -> MutableSequence[Any]:
        ...


class TraversableMixin:
    """Adds iter() and iter_mut() to any node implementing the protocols."""

    def iter(self, order: Union['TraversalOrder', str] = 'bfs',
             adapter: Optional[Any] = None) -> 'TreeIter':
        """Create a read-only traversal rooted at this node.

        Args:
            order: Traversal order (TraversalOrder member or alias)
            adapter: Optional TreeAdapter overriding get_children()

        Returns:
            TreeIter yielding this node and its descendants
        """
        from .iter import TreeIter
        return TreeIter([self], order=order, adapter=adapter)

    def iter_mut(self, order: Union['TraversalOrder', str] = 'bfs',
                 adapter: Optional[Any] = None) -> 'TreeMutIter':
        """Create a mutating traversal rooted at this node.

        Args:
            order: Traversal order (TraversalOrder member or alias)
            adapter: Optional TreeAdapter overriding get_children_mut()

        Returns:
            TreeMutIter handing out one cursor per node
        """
        from .iter_mut import TreeMutIter
        return TreeMutIter([self], order=order, adapter=adapter)
