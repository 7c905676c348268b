"""Core abstractions for treeiter.

This package contains the node capability contracts, the adapters that
provide them for arbitrary node shapes, and the two traversal engines.
"""

from .node import SupportsChildren, SupportsChildrenMut, TraversableMixin
from .adapter import (
    TreeAdapter,
    NodeProtocolAdapter,
    AttributeAdapter,
    MappingAdapter,
    FunctionAdapter,
    as_adapter,
)
from .iter import TreeIter
from .iter_mut import TreeMutIter, TreeCursor

__all__ = [
    "SupportsChildren",
    "SupportsChildrenMut",
    "TraversableMixin",
    "TreeAdapter",
    "NodeProtocolAdapter",
    "AttributeAdapter",
    "MappingAdapter",
    "FunctionAdapter",
    "as_adapter",
    "TreeIter",
    "TreeMutIter",
    "TreeCursor",
]
