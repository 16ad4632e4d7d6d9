"""Demonstration scenarios exercising the tree operations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from bintree import measures
from bintree.node import Node
from bintree.printer import print_tree
from bintree.traversal import inorder, postorder, preorder

_NIL = "(nil)"


def _full_sample() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _basic() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _family() -> Node:
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


def _demo_node(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    print_tree(root, out)


def _demo_insert_left(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    root.detach()


def _demo_is_leaf(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _demo_is_root(out: TextIO) -> None:
    root = _basic()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_demo(walk: Callable[[Node], object]) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _full_sample()
        print_tree(root, out)
        for value in walk(root):
            print(value, file=out)

    return run


def _measure_demo(label: str, measure: Callable[[Node], int]) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _basic()
        print_tree(root, out)
        for node in (root, root.right, root.left.right):
            print(f"{label} {node.value}: {measure(node)}", file=out)

    return run


def _demo_balance(out: TextIO) -> None:
    root = _basic()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {measures.balance(node):+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _basic()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(measures.is_full(node))}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _basic()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    print(f"Perfect: {int(measures.is_perfect(root))}\n", file=out)
    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(measures.is_perfect(root))}\n", file=out)
    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(measures.is_perfect(root))}", file=out)


def _show(node: Optional[Node]) -> str:
    return _NIL if node is None else str(node.value)


def _demo_sibling(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_show(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_show(node.uncle())}", file=out)


_DEMOS: Dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal_demo(preorder),
    7: _traversal_demo(inorder),
    8: _traversal_demo(postorder),
    9: _measure_demo("Height from", measures.height),
    10: _measure_demo("Depth of", Node.depth),
    11: _measure_demo("Size of", measures.size),
    12: _measure_demo("Leaves in", measures.leaves),
    13: _measure_demo("Nodes in", measures.internal_nodes),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run the demonstration with the given number, writing to ``out``."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: run the requested demos, or all of them."""
    parser = argparse.ArgumentParser(description="Run binary tree demonstrations.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        choices=sorted(_DEMOS),
        metavar="N",
        help="demo numbers to run (0-18); all when omitted",
    )
    args = parser.parse_args(argv)
    numbers: List[int] = args.numbers or sorted(_DEMOS)
    for number in numbers:
        run_demo(number, sys.stdout)
    return 0