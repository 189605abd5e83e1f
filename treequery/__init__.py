"""Search, test and collect values in nested data with filter predicates."""

__version__ = "0.1.0"

__all__ = ["filters", "find", "has", "node", "traverse"]