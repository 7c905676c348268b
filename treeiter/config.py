"""Configuration system for treeiter.

This module defines the traversal orders the engines understand and the
configuration object used to tune how an engine hands out nodes.
"""

from collections.abc import Reversible
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Iterable, List, Optional, Union

from .errors import InvalidOrderError


class TraversalOrder(Enum):
    """How the frontier is fed with a visited node's children.

    The set is closed: an Enum with members cannot be subclassed, so no
    third order can be defined outside this module.
    """
    BREADTH_FIRST = "bfs"   # Children appended to the tail
    DEPTH_FIRST = "dfs"     # Children pushed to the head, first child in front

    def enqueue(self, frontier: Deque[Any], children: Iterable[Any]) -> None:
        """Push a visited node's children into the frontier.

        Args:
            frontier: Pending nodes, front is dequeued next
            children: The node's children in their natural order
        """
        if self is TraversalOrder.BREADTH_FIRST:
            frontier.extend(children)
            return

        if not isinstance(children, Reversible):
            children = list(children)
        # extendleft reverses its input, so feed it reversed children
        frontier.extendleft(reversed(children))

    @classmethod
    def parse(cls, value: Union['TraversalOrder', str]) -> 'TraversalOrder':
        """Resolve an order from a member or one of its string aliases.

        Args:
            value: TraversalOrder member or name such as "bfs" or "depth_first"

        Returns:
            The matching TraversalOrder

        Raises:
            InvalidOrderError: If value does not name a known order
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            order = _ORDER_ALIASES.get(value.strip().lower())
            if order is not None:
                return order

        raise InvalidOrderError(
            f"Unknown traversal order: {value!r}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )


_ORDER_ALIASES = {
    'bfs': TraversalOrder.BREADTH_FIRST,
    'breadth_first': TraversalOrder.BREADTH_FIRST,
    'breadth-first': TraversalOrder.BREADTH_FIRST,
    'level': TraversalOrder.BREADTH_FIRST,
    'dfs': TraversalOrder.DEPTH_FIRST,
    'dfs_pre': TraversalOrder.DEPTH_FIRST,
    'depth_first': TraversalOrder.DEPTH_FIRST,
    'depth-first': TraversalOrder.DEPTH_FIRST,
    'preorder': TraversalOrder.DEPTH_FIRST,
}

# Short names for the two orders
BreadthFirst = TraversalOrder.BREADTH_FIRST
DepthFirst = TraversalOrder.DEPTH_FIRST


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal engine.

    Engines accept an explicit order or adapter as well; those override
    the values held here.
    """

    # Frontier discipline
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST

    # Release a still-live cursor when the next one is requested,
    # instead of raising CursorActiveError
    auto_release: bool = True

    # TreeAdapter or children callable; None means the node protocols
    adapter: Optional[Any] = None

    @classmethod
    def breadth_first(cls, **kwargs) -> 'TraversalConfig':
        """Create config for level-order traversal."""
        return cls(order=TraversalOrder.BREADTH_FIRST, **kwargs)

    @classmethod
    def depth_first(cls, **kwargs) -> 'TraversalConfig':
        """Create config for pre-order depth-first traversal."""
        return cls(order=TraversalOrder.DEPTH_FIRST, **kwargs)

    @classmethod
    def strict(cls, order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST) -> 'TraversalConfig':
        """Create config where every cursor must be released explicitly.

        Args:
            order: Traversal order to use

        Returns:
            TraversalConfig with auto_release disabled
        """
        return cls(order=order, auto_release=False)

    def resolved_order(self) -> TraversalOrder:
        """Return the configured order as a TraversalOrder member."""
        return TraversalOrder.parse(self.order)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            TraversalOrder.parse(self.order)
        except InvalidOrderError as e:
            errors.append(str(e))

        if not isinstance(self.auto_release, bool):
            errors.append("auto_release must be a bool")

        if self.adapter is not None:
            if not (callable(self.adapter) or hasattr(self.adapter, 'get_children')):
                errors.append("adapter must be a TreeAdapter or a callable returning children")

        return errors
