"""Turn management for Tycoon 1824."""

from .turn_manager import TurnManager

__all__ = [
    "TurnManager",
]
