"""Expressions, conditions, instructions, tokens and an in-memory garden for a small turtle language."""

__version__ = "1.0.0"