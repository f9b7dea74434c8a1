"""Filter two integer tables by key with map-based and direct strategies."""

__version__ = "0.1.0"
__all__ = ["columns", "cli"]