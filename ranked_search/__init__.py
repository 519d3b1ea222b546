"""Ranked full-text search over MySQL boolean-mode MATCH ... AGAINST."""

__version__ = "1.0.0"
