"""Helpers for layout tools: shared pointers, dependency ordering, string enums, error helpers, error contexts and serialization."""

__version__ = "3.0.0"
__all__ = ["context", "dep_order", "enumstr", "error", "ptr", "ser"]