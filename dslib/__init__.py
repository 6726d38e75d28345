"""Small container types: linked lists, a growable vector and a mutable string."""

__version__ = "0.1.0"