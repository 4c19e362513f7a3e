"""Core scheduling modules."""
