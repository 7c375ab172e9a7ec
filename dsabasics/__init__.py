"""Beginner data-structures and algorithms exercises: patterns, maths, recursion, hashing, sorting and extras."""

__version__ = "0.1.0"

__all__ = ["basic_math", "extras", "hashing", "patterns", "recursion", "sorting"]