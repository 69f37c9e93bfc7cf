"""Classic algorithm exercises: arithmetic, text, patterns, sorting, searching, matrices,
partitioning and array problems."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "matrix",
    "partition",
    "patterns",
    "searching",
    "sorting",
    "text",
]