"""Contract tests ensuring read-only and mutating traversal behave identically.

When no node is modified during the visit, these must agree:
1. TreeIter
2. TreeMutIter driven by step()/release()
3. TreeMutIter driven by step_with()
4. The ordering guarantees of each order hold for all of them
"""

from typing import Any, Dict, List

import pytest

from treeiter import (
    BreadthFirst,
    DepthFirst,
    Node,
    TraversalConfig,
    TraversalOrder,
    TreeIter,
    TreeMutIter,
)
from treeiter.testing import build_tree


TREE_SHAPES = [
    0,
    (0, [1]),
    (0, [1, 2, 3]),
    (0, [(1, [(2, [(3, [4])])])]),
    (1, [(2, [4, 5]), 3]),
    (1, [(2, [(4, [7]), 5]), (3, [(6, [8, 9])])]),
    ("r", [("a", ["a1", ("a2", ["a2x", "a2y"])]), "b", ("c", ["c1"])]),
]


def depths(roots: List[Node]) -> Dict[int, int]:
    """Map id(node) -> depth, computed independently of the engines."""
    result = {}
    stack = [(root, 0) for root in roots]
    while stack:
        node, depth = stack.pop()
        result[id(node)] = depth
        stack.extend((child, depth + 1) for child in node.children)
    return result


def parents(roots: List[Node]) -> Dict[int, Any]:
    result = {}
    stack = list(roots)
    while stack:
        node = stack.pop()
        for child in node.children:
            result[id(child)] = node
            stack.append(child)
    return result


def read_only(roots, order) -> List[Any]:
    return list(TreeIter(roots, order))


def mutating_explicit_release(roots, order) -> List[Any]:
    engine = TreeMutIter(roots, config=TraversalConfig.strict(order))
    seen = []
    while True:
        cursor = engine.step()
        if cursor is None:
            return seen
        seen.append(cursor.node)
        cursor.release()


def mutating_callback(roots, order) -> List[Any]:
    engine = TreeMutIter(roots, order)
    seen = []
    while engine.step_with(seen.append):
        pass
    return seen


ENGINES = [read_only, mutating_explicit_release, mutating_callback]


@pytest.fixture(params=TREE_SHAPES, ids=lambda shape: repr(shape)[:30])
def forest(request):
    return [build_tree(request.param), build_tree(request.param)]


@pytest.mark.parametrize("order", list(TraversalOrder))
def test_engines_agree(forest, order):
    results = [[id(node) for node in run(forest, order)] for run in ENGINES]
    assert results[0] == results[1] == results[2]


@pytest.mark.parametrize("run", ENGINES)
@pytest.mark.parametrize("order", list(TraversalOrder))
def test_every_node_visited_once(forest, order, run):
    visited = [id(node) for node in run(forest, order)]
    assert len(visited) == len(set(visited))
    assert set(visited) == set(depths(forest))


@pytest.mark.parametrize("run", ENGINES)
def test_breadth_first_depth_never_decreases(forest, run):
    depth_of = depths(forest)
    visited = [depth_of[id(node)] for node in run(forest, BreadthFirst)]
    assert visited == sorted(visited)


@pytest.mark.parametrize("run", ENGINES)
def test_depth_first_is_pre_order_per_root(forest, run):
    visited = run(forest, DepthFirst)
    position = {id(node): i for i, node in enumerate(visited)}
    parent_of = parents(forest)

    # Parent before child
    for node in visited:
        parent = parent_of.get(id(node))
        if parent is not None:
            assert position[id(parent)] < position[id(node)]

    # First root's whole subtree before the second root
    first_subtree = len(depths([forest[0]]))
    assert visited[first_subtree] is forest[1]


@pytest.mark.parametrize("run", ENGINES)
@pytest.mark.parametrize("order", list(TraversalOrder))
def test_siblings_in_child_order(forest, order, run):
    visited = run(forest, order)
    position = {id(node): i for i, node in enumerate(visited)}
    for node in visited:
        sibling_positions = [position[id(child)] for child in node.children]
        assert sibling_positions == sorted(sibling_positions)
