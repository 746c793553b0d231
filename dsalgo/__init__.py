"""Classic data structures and algorithms: sorts, heaps, lists, hashing and search trees."""

__version__ = "0.1.0"