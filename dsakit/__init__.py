"""Classic data structures and algorithms in plain Python: lists, trees, heaps,
hash tables, expression evaluation and numeric helpers."""

__version__ = "0.1.0"