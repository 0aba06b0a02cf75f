"""Cheese Wizard: an in-memory cheese registry with bounded user ratings."""

__version__ = "0.1.0"
