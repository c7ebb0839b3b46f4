"""Classic algorithms and small data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "containers",
    "dynamic",
    "linkedlist",
    "matrix",
    "search",
    "text",
    "trees",
]