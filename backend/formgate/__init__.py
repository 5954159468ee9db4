"""Formgate form login service."""

__version__ = "0.1.0"
