import pytest

from dsakit.binary_tree import (
    TreeNode,
    build_tree,
    inorder,
    level_order,
    lowest_common_ancestor,
    postorder,
    preorder,
)

SAMPLE = [1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1]


@pytest.fixture
def sample_tree():
    return build_tree(SAMPLE)


def test_inorder_sample(sample_tree):
    assert inorder(sample_tree) == [7, 3, 11, 1, 17, 5]


def test_postorder_sample(sample_tree):
    assert postorder(sample_tree) == [7, 11, 3, 17, 5, 1]


def test_level_order_sample(sample_tree):
    assert level_order(sample_tree) == [[1], [3, 5], [7, 11, 17]]


def test_preorder_reproduces_input(sample_tree):
    assert preorder(sample_tree) == [v for v in SAMPLE if v != -1]


def test_traversals_visit_same_values(sample_tree):
    expected = sorted(v for v in SAMPLE if v != -1)
    assert sorted(inorder(sample_tree)) == expected
    assert sorted(postorder(sample_tree)) == expected
    assert sorted(v for level in level_order(sample_tree) for v in level) == expected


def test_structure_of_built_tree(sample_tree):
    assert sample_tree.data == SAMPLE[0]
    assert sample_tree.left.data == SAMPLE[1]
    assert sample_tree.left.left.data == SAMPLE[2]
    assert sample_tree.right.right is None


def test_empty_tree():
    root = build_tree([-1])
    assert root is None
    assert inorder(root) == []
    assert preorder(root) == []
    assert postorder(root) == []
    assert level_order(root) == []


def test_incomplete_input_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2, -1])


def test_manual_tree_traversals():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert inorder(root) == [1, 2, 3]
    assert preorder(root) == [2, 1, 3]
    assert postorder(root) == [1, 3, 2]


def test_lca_siblings(sample_tree):
    assert lowest_common_ancestor(sample_tree, 7, 11) is sample_tree.left


def test_lca_across_subtrees(sample_tree):
    assert lowest_common_ancestor(sample_tree, 7, 17) is sample_tree


def test_lca_ancestor_of_other(sample_tree):
    assert lowest_common_ancestor(sample_tree, 3, 7) is sample_tree.left


def test_lca_missing_values(sample_tree):
    assert lowest_common_ancestor(sample_tree, 99, 100) is None


def test_lca_one_present(sample_tree):
    assert lowest_common_ancestor(sample_tree, 17, 100) is sample_tree.right.left


def test_lca_empty_tree():
    assert lowest_common_ancestor(None, 1, 2) is None