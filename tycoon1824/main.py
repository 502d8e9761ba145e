"""Main entry point for Tycoon 1824."""

import logging
import os
import sys

from dotenv import load_dotenv

DEFAULT_PLAYERS = "Alice,Bob,Charlie,Dana"


def setup_logging() -> None:
    """Configure logging for the application."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def get_player_names() -> list[str]:
    """Get demo player names from the environment.

    Returns:
        List of player names.
    """
    names = os.getenv("DEMO_PLAYERS", DEFAULT_PLAYERS)
    return [name.strip() for name in names.split(",") if name.strip()]


def run_demo() -> None:
    """Play a first stock round in which every player passes."""
    from tycoon1824.engine.first_stock_round import FirstStockRound
    from tycoon1824.models.game_state import GameState
    from tycoon1824.models.player import Player
    from tycoon1824.renderer.state_renderer import StateRenderer
    from tycoon1824.turn_manager.turn_manager import TurnManager

    print("🚂 Tycoon 1824 Demo 🚂")
    print("=" * 40)

    state = GameState(id="demo_game")
    for i, name in enumerate(get_player_names(), 1):
        state.add_player(Player(id=f"p{i}", name=name))
    state.initialize_game()

    stock_round = FirstStockRound(state)
    manager = TurnManager(state, stock_round)
    renderer = StateRenderer(state, stock_round)

    player_id = manager.start_round()
    print(renderer.render_full_snapshot())
    print()

    while player_id is not None:
        print(f"⏭️ {state.players[player_id].name} passes")
        player_id = manager.pass_turn(player_id)

    print()
    print(renderer.render_full_snapshot())
    print()
    print(renderer.render_log(limit=len(state.log)))


def main() -> None:
    """Run the Tycoon 1824 demo."""
    load_dotenv()
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        run_demo()
    except Exception as e:
        logger.exception(f"Demo failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
