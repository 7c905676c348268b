"""Tests for the functional API."""

import pytest

from treeiter import (
    AttributeAdapter,
    DepthFirst,
    Node,
    TreeMutIter,
    count_forest_nodes,
    count_nodes,
    traverse_forest,
    traverse_tree,
    traverse_tree_mut,
    visit_forest_mut,
    visit_tree_mut,
)
from treeiter.testing import build_forest, build_tree, values


@pytest.fixture
def tree():
    return build_tree((1, [(2, [4, 5]), 3]))


def test_traverse_tree(tree):
    assert values(traverse_tree(tree, "dfs")) == [1, 2, 4, 5, 3]
    assert values(traverse_tree(tree)) == [1, 2, 3, 4, 5]


def test_traverse_forest():
    forest = build_forest((1, [2]), (3, [4]))
    assert values(traverse_forest(forest, "dfs")) == [1, 2, 3, 4]
    assert values(traverse_forest(forest, "bfs")) == [1, 3, 2, 4]


def test_traverse_tree_mut(tree):
    engine = traverse_tree_mut(tree, DepthFirst)
    assert isinstance(engine, TreeMutIter)
    for cursor in engine:
        cursor.value *= 10
    assert values(traverse_tree(tree, "dfs")) == [10, 20, 40, 50, 30]


def test_visit_tree_mut(tree):
    def double(node):
        node.value *= 2

    assert visit_tree_mut(tree, double, order="dfs") == 5
    assert values(traverse_tree(tree, "dfs")) == [2, 4, 8, 10, 6]


def test_visit_tree_mut_counts_added_children():
    def sprout(node):
        if node.value == 1:
            node.children.extend([Node(2), Node(3)])

    root = Node(1)
    assert visit_tree_mut(root, sprout) == 3


def test_visit_forest_mut():
    forest = build_forest((1, [2]), (3, [4]))
    seen = []
    assert visit_forest_mut(forest, lambda n: seen.append(n.value), order="bfs") == 4
    assert seen == [1, 3, 2, 4]


def test_count_nodes(tree):
    assert count_nodes(tree) == 5
    assert count_nodes(Node(1)) == 1


def test_count_forest_nodes():
    assert count_forest_nodes(build_forest((1, [2]), (3, [4]))) == 4
    assert count_forest_nodes([]) == 0


@pytest.mark.parametrize("wrap", [tuple, iter, lambda roots: (r for r in roots)])
def test_forest_helpers_accept_any_iterable(wrap):
    forest = build_forest((1, [2]), (3, [4]))
    assert count_forest_nodes(wrap(forest)) == 4
    seen = []
    assert visit_forest_mut(wrap(forest), lambda n: seen.append(n.value), order="dfs") == 4
    assert seen == [1, 2, 3, 4]


def test_list_subclass_node_is_a_single_root():
    class ListNode(list):
        """Node whose children are its own items."""

        def get_children(self):
            return list(self)

        def get_children_mut(self):
            return self

    root = ListNode([ListNode(), ListNode([ListNode()])])
    assert count_nodes(root) == 4
    assert visit_tree_mut(root, lambda n: None) == 4


def test_count_nodes_with_adapter():
    class Item:
        def __init__(self, *kids):
            self.kids = list(kids)

    root = Item(Item(Item()), Item())
    assert count_nodes(root, adapter=AttributeAdapter("kids")) == 4
