"""Classic searching, sorting, hashing, recursion and array algorithms, plus a matrix-printing command."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "hashing", "recursion", "search", "sorting"]