"""Test fixtures for treeiter consumers.

These helpers make traversal tests short to write: build a tree from a
nested literal, pull the payloads out of a traversal, and record when an
engine asks for a node's children.
"""

from typing import Any, Iterable, List, Tuple

from ..core.adapter import TreeAdapter, as_adapter
from ..tree import Node


def build_tree(shape: Any) -> Node:
    """Build a Node tree from a nested literal.

    A bare value is a leaf; a (value, [children...]) tuple is an inner
    node whose children are shapes themselves.

    Example:
        >>> build_tree((1, [(2, [4, 5]), 3]))
        Node(value=1, children=[Node(value=2, ...), Node(value=3, ...)])

    Args:
        shape: Nested (value, children) tuples or bare leaf values

    Returns:
        Root Node
    """
    if isinstance(shape, tuple) and len(shape) == 2 and isinstance(shape[1], list):
        value, children = shape
        return Node(value, [build_tree(child) for child in children])
    return Node(shape)


def build_forest(*shapes: Any) -> List[Node]:
    """Build one Node tree per shape."""
    return [build_tree(shape) for shape in shapes]


def values(nodes: Iterable[Any], attr: str = "value") -> List[Any]:
    """Collect an attribute from every node an iterable yields.

    Works with TreeIter (nodes) and TreeMutIter (cursors forward attribute
    reads to their node).
    """
    return [getattr(node, attr) for node in nodes]


class RecordingAdapter(TreeAdapter):
    """Adapter that records every children lookup before delegating.

    Example:
        adapter = RecordingAdapter()
        engine = TreeMutIter([root], adapter=adapter)
        cursor = engine.step()
        assert adapter.calls == []     # children not read yet
        cursor.release()
        assert adapter.calls == [("get_children_mut", root)]
    """

    def __init__(self, inner: Any = None):
        """Initialize with the adapter to delegate to.

        Args:
            inner: TreeAdapter or children callable (default: node protocols)
        """
        self.inner = as_adapter(inner)
        self.calls: List[Tuple[str, Any]] = []

    def get_children(self, node: Any) -> Iterable[Any]:
        self.calls.append(("get_children", node))
        return self.inner.get_children(node)

    def get_children_mut(self, node: Any):
        self.calls.append(("get_children_mut", node))
        return self.inner.get_children_mut(node)

    def reset(self) -> None:
        self.calls.clear()
