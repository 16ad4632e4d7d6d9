import pytest

from bintree.node import Node


def _three_node_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def _family_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_fields():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None and node.right is None


def test_node_with_parent_does_not_attach():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None


def test_repr_shows_value():
    assert repr(Node(42)) == "Node(42)"


def test_insert_left_into_empty_slot():
    root = Node(98)
    child = root.insert_left(12)
    assert root.left is child
    assert child.parent is root
    assert child.value == 12
    assert child.is_leaf()


def test_insert_left_pushes_existing_child_down():
    root = _three_node_tree()
    old_left = root.left
    root.insert_left(root.right.value) if False else None
    root.right.insert_left(128)
    new = root.insert_left(54)
    assert root.left is new
    assert new.value == 54
    assert new.left is old_left
    assert old_left.parent is new
    assert new.right is None
    assert root.right.left.value == 128
    assert root.right.left.parent is root.right


def test_insert_right_pushes_existing_child_down():
    root = _three_node_tree()
    old_right = root.right
    root.left.insert_right(54)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old_right
    assert old_right.parent is new
    assert new.left is None
    assert root.left.right.value == 54
    assert root.left.right.parent is root.left


def test_detach_removes_subtree_from_parent():
    root = _family_tree()
    branch = root.right
    branch.detach()
    assert root.right is None
    assert branch.parent is None
    assert branch.is_root()
    assert branch.right.value == 402
    assert branch.right.right.value == 512


def test_detach_root_is_harmless():
    root = _three_node_tree()
    root.detach()
    assert root.is_root()
    assert root.left.value == 12


def test_is_leaf():
    root = _three_node_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_is_root():
    root = _three_node_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_depth_of_root_is_zero():
    assert Node(98).depth() == 0


def test_depth_grows_by_one_per_level():
    root = _three_node_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    for node in (root.right, root.left.right, root.right.right):
        assert node.depth() == node.parent.depth() + 1


@pytest.mark.parametrize("levels", [1, 3, 10])
def test_depth_of_chain_matches_levels(levels):
    node = Node(0)
    for value in range(levels):
        node = node.insert_left(value)
    assert node.depth() == levels


def test_sibling():
    root = _family_tree()
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_missing_returns_none():
    root = Node(98)
    child = root.insert_left(12)
    assert child.sibling() is None


def test_uncle():
    root = _family_tree()
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None