"""Readable implementations of classic data structures and algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "basics", "bits", "brackets", "circular", "linkedlist", "sorting"]