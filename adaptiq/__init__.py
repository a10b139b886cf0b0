"""A priority queue with adaptive choice of sorting algorithm, and the sorting functions it uses."""

__version__ = "0.1.0"
__all__ = ["algorithms", "pqueue"]