"""Tycoon 1824: first stock round engine for an 18xx railway game."""

__version__ = "0.1.0"
