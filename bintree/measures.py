"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def _levels(tree: Optional[Node]) -> int:
    """Number of levels in the tree: 0 for an empty tree, 1 for a single node."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + 1 + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.is_leaf() else 1
    return internal_nodes(tree.left) + internal_nodes(tree.right) + own


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left levels minus right levels; 0 if empty."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all levels of the tree are completely filled."""
    if tree is None:
        return False
    return size(tree) == (1 << _levels(tree)) - 1