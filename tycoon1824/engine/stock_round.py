"""Stock round handling for Tycoon 1824."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tycoon1824.models.corporation import Corporation
    from tycoon1824.models.game_state import GameState
    from tycoon1824.models.player import Player

from tycoon1824.errors import ConfigurationError


class StockRound:
    """Manages the turn order and end of a stock round.

    Attributes:
        state: Reference to game state.
        entities: Players acting this round, in turn order.
        entity_index: Index of the acting player in entities.
        finished: Whether the round has been finished.
    """

    def __init__(self, state: "GameState") -> None:
        """Initialize stock round handler.

        Args:
            state: The game state.
        """
        self.state = state
        self.entities: list["Player"] = []
        self.entity_index = 0
        self.finished = False
        self.logger = logging.getLogger(__name__)

    @property
    def description(self) -> str:
        return "Stock Round"

    @property
    def reverse(self) -> bool:
        """Check if turns are taken in reverse priority order."""
        return False

    @property
    def current_entity(self) -> "Player | None":
        """Get the acting player."""
        if not self.entities:
            return None
        return self.entities[self.entity_index]

    def select_entities(self) -> list["Player"]:
        """Get the players taking part in this round, in turn order."""
        return self.state.priority_order()

    def setup(self) -> None:
        """Build the working entity list and start at its head."""
        entities = self.select_entities()
        if not entities:
            self.logger.error(f"{self.description} has no players")
            raise ConfigurationError(f"{self.description} needs at least one player")

        self.state.round_description = self.description
        self.entities = entities
        self.entity_index = 0
        self.finished = False
        self.logger.info(
            f"{self.description} set up for {', '.join(p.name for p in entities)}"
        )

    def next_entity_index(self) -> int:
        """Step forward to the next player, wrapping around.

        Returns:
            The new entity index.
        """
        self.entity_index = (self.entity_index + 1) % len(self.entities)
        return self.entity_index

    def next_entity(self) -> "Player | None":
        """Advance to and return the next acting player."""
        if not self.entities:
            return None
        self.next_entity_index()
        return self.current_entity

    def sold_out(self, corporation: "Corporation") -> bool:
        """Check if players hold every share of a corporation."""
        return self.state.stock_market.is_sold_out(corporation)

    def sold_out_stock_movement(self, corporation: "Corporation") -> None:
        """Move a sold out corporation's share price."""
        self.state.stock_market.move_up(corporation)

    def log_share_price(self, corporation: "Corporation", prev: int) -> None:
        """Log a share price change, if the price moved."""
        price = corporation.share_price.price
        if price == prev:
            return
        self.state.log_line(f"{corporation.name}'s share price moves from {prev}G to {price}G")
        self.state.log_event(
            "share_price",
            {"corporation_id": corporation.id, "from": prev, "to": price},
        )

    def finish(self) -> None:
        """End the round. Called once by the round driver."""
        self.logger.info(f"Finishing {self.description}")
        self.finish_round()
        self.finished = True

    def finish_round(self) -> None:
        """Resolve end of round effects. Nothing to do by default."""
