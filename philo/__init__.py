"""Dining philosophers simulation with threads and fork locks."""

__version__ = "0.1.0"