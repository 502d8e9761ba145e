"""Player model for Tycoon 1824."""

from dataclasses import dataclass


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        id: Unique identifier for the player.
        name: Display name of the player.
        cash: Current cash in gulden.
    """

    id: str
    name: str
    cash: int = 0
