"""Text rendering for Tycoon 1824."""

from .state_renderer import StateRenderer

__all__ = [
    "StateRenderer",
]
