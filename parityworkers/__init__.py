"""Threaded generation of unique random numbers, reported sorted by parity."""

__version__ = "0.1.0"
__all__ = ["__version__"]