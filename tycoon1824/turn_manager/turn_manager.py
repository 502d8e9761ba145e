"""Turn manager for Tycoon 1824 stock rounds."""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tycoon1824.engine.stock_round import StockRound
    from tycoon1824.models.game_state import GameState


class TurnManager:
    """Drives a stock round turn by turn.

    Advances the round once per turn, skips players who have passed, and
    finishes the round exactly once when every player has passed in
    succession.

    Attributes:
        state: Reference to game state.
        stock_round: The round being played.
        passed_players: Players who passed since the last action.
    """

    def __init__(self, state: "GameState", stock_round: "StockRound") -> None:
        """Initialize turn manager.

        Args:
            state: The game state to manage.
            stock_round: The round to drive.
        """
        self.state = state
        self.stock_round = stock_round
        self.passed_players: set[str] = set()
        self.logger = logging.getLogger(__name__)

    @property
    def round_finished(self) -> bool:
        return self.stock_round.finished

    def start_round(self) -> str | None:
        """Set up the round and move to the first acting player.

        Returns:
            ID of the first player to act.
        """
        self.stock_round.setup()
        self.passed_players.clear()
        player = self.stock_round.next_entity()
        self.logger.info(f"{self.stock_round.description} started, {player.name} acts first")
        return player.id

    def get_current_player_id(self) -> str | None:
        """Get the ID of the current player.

        Returns:
            Current player ID or None if the round is over.
        """
        if self.round_finished:
            return None
        player = self.stock_round.current_entity
        return player.id if player else None

    def is_player_turn(self, player_id: str) -> bool:
        """Check if it's a specific player's turn."""
        return self.get_current_player_id() == player_id

    def take_action(self, player_id: str) -> str | None:
        """Record an action by the current player and end their turn.

        Any action other than passing restarts the succession of passes.

        Args:
            player_id: Player who acted.

        Returns:
            ID of the next player to act.
        """
        self._check_turn(player_id)
        self.passed_players.clear()
        self.state.log_event("action", {"player": player_id})
        return self.advance_turn()

    def pass_turn(self, player_id: str) -> str | None:
        """Pass for the current player.

        Args:
            player_id: Player who passes.

        Returns:
            ID of the next player to act, or None if the round ended.
        """
        self._check_turn(player_id)
        self.passed_players.add(player_id)
        self.state.log_event("pass", {"player": player_id})

        if self._all_players_passed():
            self._end_round()
            return None

        return self.advance_turn()

    def advance_turn(self) -> str | None:
        """Advance to the next player who has not passed.

        Returns:
            ID of the new current player.
        """
        player = self.stock_round.next_entity()

        # Skip passed players
        attempts = 0
        while player.id in self.passed_players and attempts < len(
            self.stock_round.entities
        ):
            player = self.stock_round.next_entity()
            attempts += 1

        return player.id

    def get_turn_info(self) -> dict[str, Any]:
        """Get information about the current turn.

        Returns:
            Dictionary with turn information.
        """
        current_id = self.get_current_player_id()
        current = self.state.players.get(current_id) if current_id else None

        return {
            "round": self.stock_round.description,
            "current_player": {
                "id": current.id if current else None,
                "name": current.name if current else None,
            },
            "direction": "reverse" if self.stock_round.reverse else "forward",
            "passed_players": sorted(self.passed_players),
            "players_remaining": len(self.state.player_order) - len(self.passed_players),
            "finished": self.round_finished,
        }

    def _check_turn(self, player_id: str) -> None:
        """Reject actions out of turn or after the round ended."""
        if self.round_finished:
            raise ValueError(f"{self.stock_round.description} has already finished")
        if not self.is_player_turn(player_id):
            raise ValueError(f"Not {player_id}'s turn")

    def _all_players_passed(self) -> bool:
        return len(self.passed_players) >= len(self.state.player_order)

    def _end_round(self) -> None:
        """Finish the round once every player has passed."""
        self.logger.info(f"All players passed, ending {self.stock_round.description}")
        self.stock_round.finish()
