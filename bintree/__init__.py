"""Binary tree nodes, traversals, measures, an ASCII tree printer and demos."""

__version__ = "0.1.0"
__all__ = ["demo", "measures", "node", "printer", "traversal"]