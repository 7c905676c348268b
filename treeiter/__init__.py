"""treeiter - Breadth-first and depth-first iteration over any tree.

treeiter walks any hierarchical structure that can list a node's children,
either read-only or with in-place mutation of each node before its
children are discovered.

Read-only:
    from treeiter import TreeIter, DepthFirst
    for node in TreeIter([root], DepthFirst): ...

Mutating:
    from treeiter import TreeMutIter
    for cursor in TreeMutIter([root]):
        cursor.children.append(Node(0))   # visited later in this traversal
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeIterError,
    InvalidOrderError,
    ConfigurationError,
    NodeCapabilityError,
    CursorError,
    CursorActiveError,
    CursorReleasedError,
)
from .config import TraversalOrder, TraversalConfig, BreadthFirst, DepthFirst
from .core import (
    SupportsChildren,
    SupportsChildrenMut,
    TraversableMixin,
    TreeAdapter,
    NodeProtocolAdapter,
    AttributeAdapter,
    MappingAdapter,
    FunctionAdapter,
    as_adapter,
    TreeIter,
    TreeMutIter,
    TreeCursor,
)
from .tree import Node
from .api import (
    traverse_tree,
    traverse_forest,
    traverse_tree_mut,
    visit_tree_mut,
    visit_forest_mut,
    count_nodes,
    count_forest_nodes,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeIterError",
    "InvalidOrderError",
    "ConfigurationError",
    "NodeCapabilityError",
    "CursorError",
    "CursorActiveError",
    "CursorReleasedError",
    # Config
    "TraversalOrder",
    "TraversalConfig",
    "BreadthFirst",
    "DepthFirst",
    # Core
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
    # Default node
    "Node",
    # API
    "traverse_tree",
    "traverse_forest",
    "traverse_tree_mut",
    "visit_tree_mut",
    "visit_forest_mut",
    "count_nodes",
    "count_forest_nodes",
]
