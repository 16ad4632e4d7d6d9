"""Binary tree nodes with parent links."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node with a parent only records the parent link; attaching the
    node as a child of that parent is left to the caller, or done through
    :meth:`insert_left` and :meth:`insert_right`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves beneath it."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves beneath it."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def detach(self) -> None:
        """Remove this subtree from its parent, leaving it as a tree of its own."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()