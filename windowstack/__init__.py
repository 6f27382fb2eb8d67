"""Sliding-window, monotonic-stack, min-stack and interval dynamic-programming algorithms."""

__version__ = "0.1.0"
__all__ = ["minstack", "monotonic", "partition", "window"]