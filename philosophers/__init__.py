"""Dining philosophers simulation with threads, locks and a starvation monitor."""

__version__ = "0.1.0"
__all__ = ["__version__"]