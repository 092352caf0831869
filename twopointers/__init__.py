"""Two-pointer and sliding-window algorithms on lists and strings."""

__version__ = "1.0.0"
__all__ = ["arrays", "majority", "rotation", "stocks", "strings", "windows"]