"""Default tree node for treeiter.

Node is a plain value plus an ordered list of child nodes. It implements
both children protocols and is what the tests and simple callers use;
anything else with get_children() works just as well.
"""

import copy
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List, Tuple

from .core.node import TraversableMixin


@dataclass(eq=False)
class Node(TraversableMixin):
    """A generic tree node.

    Equality and hashing are structural: two nodes are equal when their
    values and their children are recursively equal. Nodes stay mutable,
    so do not change a node while it is used as a dict key or set member.

    Equality, hashing and clone() walk the tree with an explicit frontier
    like the traversal engines do, so they work on trees of any depth.

    Example:
        >>> tree = Node(1, [Node(2, [Node(4), Node(5)]), Node(3)])
        >>> [n.value for n in tree.iter("dfs")]
        [1, 2, 4, 5, 3]
    """

    value: Any = None
    children: List['Node'] = field(default_factory=list)

    @classmethod
    def leaf(cls, value: Any) -> 'Node':
        """Create a node with no children."""
        return cls(value)

    def get_children(self) -> List['Node']:
        return self.children

    def get_children_mut(self) -> List['Node']:
        return self.children

    def is_leaf(self) -> bool:
        return not self.children

    def clone(self) -> 'Node':
        """Return a deep copy of this subtree.

        Payloads are deep-copied with one shared memo, so a value referenced
        from several nodes is copied once.
        """
        memo: dict = {}
        root = self._copy_shell(self, memo)
        pending: Deque[Tuple['Node', 'Node']] = deque([(self, root)])
        while pending:
            source, target = pending.popleft()
            for child in source.children:
                child_copy = self._copy_shell(child, memo)
                target.children.append(child_copy)
                pending.append((child, child_copy))
        return root

    @staticmethod
    def _copy_shell(node: 'Node', memo: dict) -> 'Node':
        # Shallow copy keeps subclass fields; children are filled in by clone()
        shell = copy.copy(node)
        shell.value = copy.deepcopy(node.value, memo)
        shell.children = []
        return shell

    def __eq__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        pending: Deque[Tuple['Node', 'Node']] = deque([(self, other)])
        while pending:
            a, b = pending.popleft()
            if a is b:
                continue
            if a.__class__ is not b.__class__:
                return False
            if len(a.children) != len(b.children) or a.value != b.value:
                return False
            pending.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        # Pre-order (value, child count) pairs identify the structure
        signature = []
        stack = [self]
        while stack:
            node = stack.pop()
            signature.append((node.value, len(node.children)))
            stack.extend(reversed(node.children))
        return hash(tuple(signature))
