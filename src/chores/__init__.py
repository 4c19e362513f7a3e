"""Household chore tracking: recurring chore scheduling."""

__version__ = "0.1.0"
