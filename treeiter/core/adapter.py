"""TreeAdapter abstraction for treeiter.

Adapters decouple "how do I reach a node's children" from the node type
itself. The default adapter relies on the SupportsChildren protocols;
the others let the engines walk structures that were never written with
treeiter in mind, such as objects with a children attribute or nested
dicts loaded from JSON.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, MutableSequence, Optional

from ..errors import NodeCapabilityError


class TreeAdapter(ABC):
    """Abstract adapter for reaching the children of a node.

    Subclasses must implement get_children. Adapters whose read-only
    children are not the live collection should also override
    get_children_mut so mutating traversal sees edits.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterable[Any]:
        """Get the immediate children of node, in order.

        Args:
            node: The parent node

        Returns:
            Iterable of child nodes
        """
        pass

    def get_children_mut(self, node: Any) -> MutableSequence[Any]:
        """Get the live, mutable child collection of node.

        Default implementation falls back to get_children.

        Args:
            node: The parent node

        Returns:
            The node's child collection
        """
        return self.get_children(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NodeProtocolAdapter(TreeAdapter):
    """Adapter for nodes implementing SupportsChildren / SupportsChildrenMut."""

    def get_children(self, node: Any) -> Iterable[Any]:
        try:
            get_children = node.get_children
        except AttributeError:
            raise NodeCapabilityError(
                f"{type(node).__name__} does not implement get_children(); "
                f"implement it or pass an adapter"
            ) from None
        return get_children()

    def get_children_mut(self, node: Any) -> MutableSequence[Any]:
        try:
            get_children_mut = node.get_children_mut
        except AttributeError:
            raise NodeCapabilityError(
                f"{type(node).__name__} does not implement get_children_mut(); "
                f"implement it or pass an adapter"
            ) from None
        return get_children_mut()


class AttributeAdapter(TreeAdapter):
    """Adapter for objects that keep their children in an attribute.

    Example:
        >>> adapter = AttributeAdapter("kids")
        >>> list(TreeIter([root], adapter=adapter))
    """

    def __init__(self, attr: str = "children"):
        """Initialize with the attribute name holding the children.

        Args:
            attr: Name of the attribute (default "children")
        """
        self.attr = attr

    def get_children(self, node: Any) -> Iterable[Any]:
        try:
            return getattr(node, self.attr)
        except AttributeError:
            raise NodeCapabilityError(
                f"{type(node).__name__} has no {self.attr!r} attribute"
            ) from None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attr={self.attr!r})"


class MappingAdapter(TreeAdapter):
    """Adapter for trees made of mappings, e.g. parsed JSON.

    A node without the children key is a leaf. For mutating traversal the
    key is looked up again on release, so a child list added while the
    node is under a cursor is still discovered.
    """

    def __init__(self, key: str = "children"):
        """Initialize with the key holding the child list.

        Args:
            key: Mapping key of the children (default "children")
        """
        self.key = key

    def get_children(self, node: Any) -> Iterable[Any]:
        try:
            return node.get(self.key) or ()
        except AttributeError:
            raise NodeCapabilityError(
                f"{type(node).__name__} is not a mapping"
            ) from None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"


class FunctionAdapter(TreeAdapter):
    """Adapter built from plain callables."""

    def __init__(self,
                 get_children: Callable[[Any], Iterable[Any]],
                 get_children_mut: Optional[Callable[[Any], MutableSequence[Any]]] = None):
        """Initialize with children accessors.

        Args:
            get_children: Callable returning a node's children
            get_children_mut: Callable returning the live child collection
                (defaults to get_children)
        """
        self._get_children = get_children
        self._get_children_mut = get_children_mut or get_children

    def get_children(self, node: Any) -> Iterable[Any]:
        return self._get_children(node)

    def get_children_mut(self, node: Any) -> MutableSequence[Any]:
        return self._get_children_mut(node)


_DEFAULT_ADAPTER = NodeProtocolAdapter()


def as_adapter(adapter: Any = None) -> TreeAdapter:
    """Coerce an adapter argument into a TreeAdapter.

    Args:
        adapter: None (node protocols), a TreeAdapter, an object with a
            get_children(node) method, or a callable node -> children

    Returns:
        TreeAdapter instance

    Raises:
        NodeCapabilityError: If adapter is none of the above
    """
    if adapter is None:
        return _DEFAULT_ADAPTER
    if isinstance(adapter, TreeAdapter):
        return adapter
    if hasattr(adapter, 'get_children'):
        return FunctionAdapter(
            adapter.get_children,
            getattr(adapter, 'get_children_mut', None),
        )
    if callable(adapter):
        return FunctionAdapter(adapter)
    raise NodeCapabilityError(
        f"Cannot use {adapter!r} as an adapter: expected a TreeAdapter "
        f"or a callable returning children"
    )
