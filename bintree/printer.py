"""Text rendering of binary trees, one row of text per tree level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.node import Node


def _edges(tree: Node) -> int:
    """Number of edges on the longest downward path from ``tree``."""
    left = 1 + _edges(tree.left) if tree.left is not None else 0
    right = 1 + _edges(tree.right) if tree.right is not None else 0
    return max(left, right)


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows: List[List[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        if col < 0:
            return
        cells = self._rows[row]
        if col >= len(cells):
            cells.extend(" " * (col + 1 - len(cells)))
        cells[col] = char

    def lines(self) -> List[str]:
        return ["".join(cells).rstrip(" ").ljust(2) for cells in self._rows]


def _draw(canvas: _Canvas, node: Optional[Node], offset: int, depth: int) -> int:
    """Draw ``node`` and its subtrees; return the width the subtree takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(canvas, node.left, offset, depth + 1)
    right = _draw(canvas, node.right, offset + left + width, depth + 1)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth and is_left:
        start = offset + left + width // 2
        for col in range(start, start + width + right):
            canvas.put(depth - 1, col, "-")
        canvas.put(depth - 1, start, ".")
    elif depth:
        start = offset - width // 2
        for col in range(start, start + left + width):
            canvas.put(depth - 1, col, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, rows joined by newlines; '' if empty."""
    if tree is None:
        return ""
    canvas = _Canvas(_edges(tree) + 1)
    _draw(canvas, tree, 0, 0)
    return "\n".join(canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``file`` (standard output by default)."""
    if tree is None:
        return
    print(render(tree), file=file if file is not None else sys.stdout)