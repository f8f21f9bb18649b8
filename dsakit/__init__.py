"""Classic data-structure and algorithm exercises: numbers, arrays, linked lists, sorts, matrices."""

__version__ = "0.1.0"
__all__ = ["numtheory", "arrays", "linked_list", "sorting", "matrix"]