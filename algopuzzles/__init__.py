"""Solutions to classic algorithm puzzles on bits, strings, arrays, lists and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "linked_lists", "puzzles", "strings", "trees"]