"""Algorithm exercises on arrays, sums, matrices, numbers, text, linked lists, trees and graphs."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "graphs",
    "linked_list",
    "matrices",
    "sums",
    "text",
    "trees",
]