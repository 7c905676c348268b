"""High-level API for treeiter.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the engine classes for the cases where
building one by hand is more ceremony than needed.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .config import TraversalConfig, TraversalOrder
from .core.iter import TreeIter
from .core.iter_mut import TreeMutIter


def traverse_tree(
    root: Any,
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
    adapter: Any = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Any]:
    """Iterate over a single tree without modifying it.

    Args:
        root: Starting node
        order: Traversal order (member or alias such as "bfs", "dfs")
        adapter: Optional TreeAdapter or children callable
        config: Optional TraversalConfig; explicit arguments win

    Returns:
        Iterator yielding nodes in traversal order

    Example:
        >>> [n.value for n in traverse_tree(tree, "dfs")]
        [1, 2, 4, 5, 3]
    """
    return TreeIter([root], order=order, adapter=adapter, config=config)


def traverse_forest(
    roots: Iterable[Any],
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
    adapter: Any = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Any]:
    """Iterate over several trees as one sequence.

    Breadth-first treats all roots as depth 0; depth-first completes each
    root's subtree before starting the next root.

    Args:
        roots: Root nodes in the order they should be seeded
        order: Traversal order
        adapter: Optional TreeAdapter or children callable
        config: Optional TraversalConfig

    Returns:
        Iterator yielding nodes in traversal order
    """
    return TreeIter(roots, order=order, adapter=adapter, config=config)


def traverse_tree_mut(
    root: Any,
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
    adapter: Any = None,
    config: Optional[TraversalConfig] = None,
) -> TreeMutIter:
    """Create a mutating traversal over a single tree.

    Args:
        root: Starting node
        order: Traversal order
        adapter: Optional TreeAdapter or children callable
        config: Optional TraversalConfig

    Returns:
        TreeMutIter handing out one cursor per node
    """
    return TreeMutIter([root], order=order, adapter=adapter, config=config)


def visit_tree_mut(
    root: Any,
    visit: Callable[[Any], Any],
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
    adapter: Any = None,
) -> int:
    """Call visit on every node, discovering children after each visit.

    Children added to a node inside visit are visited as well; children
    removed inside visit are not.

    Args:
        root: Starting node
        visit: Callable receiving each node; may modify it in place
        order: Traversal order
        adapter: Optional TreeAdapter or children callable

    Returns:
        Number of nodes visited

    Example:
        >>> def double(node):
        ...     node.value *= 2
        >>> visit_tree_mut(tree, double, order="dfs")
        3
    """
    return visit_forest_mut([root], visit, order=order, adapter=adapter)


def visit_forest_mut(
    roots: Iterable[Any],
    visit: Callable[[Any], Any],
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
    adapter: Any = None,
) -> int:
    """Call visit on every node of several trees, as visit_tree_mut does.

    Args:
        roots: Root nodes in the order they should be seeded
        visit: Callable receiving each node; may modify it in place
        order: Traversal order
        adapter: Optional TreeAdapter or children callable

    Returns:
        Number of nodes visited
    """
    engine = TreeMutIter(roots, order=order, adapter=adapter)
    count = 0
    while engine.step_with(visit):
        count += 1
    return count


def count_nodes(root: Any, adapter: Any = None) -> int:
    """Count nodes in a tree.

    Args:
        root: Root node
        adapter: Optional TreeAdapter or children callable

    Returns:
        Total number of nodes
    """
    return count_forest_nodes([root], adapter=adapter)


def count_forest_nodes(roots: Iterable[Any], adapter: Any = None) -> int:
    """Count nodes across several trees."""
    # Depth-first keeps the frontier smallest on wide trees
    return sum(1 for _ in TreeIter(roots, order=TraversalOrder.DEPTH_FIRST, adapter=adapter))
