# bintree

A small toolkit for plain binary trees of integers. Each node knows its
parent and its two children. You can grow a tree, inspect it, walk it and
draw it as text.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Building a tree

`bintree.node.Node(value, parent=None)` is a tree node. Passing a parent only
records the parent link. To attach the node as a child, assign it to
`parent.left` or `parent.right`:

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, root)
```

`insert_left(value)` and `insert_right(value)` create a child, attach it and
return it. If that side is already taken, the new node takes its place. The
old child then becomes the new node's child on the same side.

```python
right = root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)      # 128 now sits between 98 and 402
```

A node can answer these questions about its own position:

- `is_leaf()`: `True` if it has no children
- `is_root()`: `True` if it has no parent
- `depth()`: the number of edges up to the root
- `sibling()`: the other child of its parent, or `None`
- `uncle()`: the sibling of its parent, or `None`
- `detach()`: cuts the node and its subtree away from its parent, leaving a
  tree of its own

## Walking a tree

`bintree.traversal` provides the three depth-first orders as generators. Each
one yields node values:

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

An empty tree (`None`) yields nothing.

## Measuring a tree

The functions in `bintree.measures` take a root node or `None`:

- `height(tree)`: edges on the longest downward path; 0 for a single node or
  an empty tree
- `size(tree)`: the number of nodes
- `leaves(tree)`: the number of nodes without children
- `internal_nodes(tree)`: the number of nodes with at least one child
- `balance(tree)`: the number of levels in the left subtree minus the number
  in the right subtree; 0 for an empty tree
- `is_full(tree)`: `True` if every node has either zero or two children;
  `False` for an empty tree
- `is_perfect(tree)`: `True` if every level is completely filled; `False` for
  an empty tree

## Drawing a tree

`bintree.printer.render(tree)` returns the tree as ASCII art, with one line
per level. It returns an empty string for an empty tree.
`print_tree(tree, file=None)` writes that drawing to `file`, or to standard
output if no file is given:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

Values are shown zero-padded to three digits.

## Demonstrations

The `bintree-demo` command runs numbered walkthroughs from 0 to 18. Each one
builds a sample tree, draws it and shows one operation on it. Give one or more
numbers to run just those walkthroughs; give none to run them all in order:

    bintree-demo 14
    bintree-demo

From Python, `bintree.demo.run_demo(number, out=None)` runs one walkthrough
and writes to `out`, or to standard output if `out` is not given. An unknown
number raises `ValueError`.

## What it does not do

The trees are not kept in any order. There is no search tree, AVL or heap
insertion, and trees cannot be saved to or loaded from files.