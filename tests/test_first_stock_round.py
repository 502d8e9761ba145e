"""Tests for the first stock round turn order."""

import pytest

from tycoon1824.engine.first_stock_round import FirstStockRound, ForwardPass, ReversePass
from tycoon1824.engine.stock_round import StockRound
from tycoon1824.errors import ConfigurationError
from tycoon1824.models.game_state import GameState
from tycoon1824.models.player import Player


def _make_state(names: list[str]) -> GameState:
    """Create a game state with players in the given priority order."""
    state = GameState(id="test_turn_order")
    for name in names:
        state.add_player(Player(id=name, name=name))
    return state


def _ids(players) -> list[str]:
    return [p.id for p in players]


def test_initial_order_is_reversed_roster():
    state = _make_state(["A", "B", "C", "D"])
    stock_round = FirstStockRound(state)

    assert _ids(stock_round.select_entities()) == ["D", "C", "B", "A"]
    # The roster itself is untouched
    assert state.player_order == ["A", "B", "C", "D"]


def test_setup_shows_forward_order():
    """After setup the working list is back in priority order."""
    state = _make_state(["A", "B", "C", "D"])
    stock_round = FirstStockRound(state)

    stock_round.setup()

    assert _ids(stock_round.entities) == ["A", "B", "C", "D"]
    assert stock_round.entity_index == 0
    assert stock_round.reverse
    assert isinstance(stock_round.order, ReversePass)
    assert state.round_description == "First Stock Round"


def test_first_lap_is_reversed_then_forward():
    state = _make_state(["A", "B", "C", "D"])
    stock_round = FirstStockRound(state)
    stock_round.setup()

    visited = [stock_round.next_entity().id for _ in range(4)]
    assert visited == ["D", "C", "B", "A"]
    assert stock_round.reverse

    assert stock_round.next_entity().id == "B"
    assert not stock_round.reverse

    visited = [stock_round.next_entity().id for _ in range(5)]
    assert visited == ["C", "D", "A", "B", "C"]


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_each_player_acts_once_before_standard_order(size):
    names = [f"p{i}" for i in range(1, size + 1)]
    state = _make_state(names)
    stock_round = FirstStockRound(state)
    stock_round.setup()

    first_lap = [stock_round.next_entity().id for _ in range(size)]
    assert first_lap == list(reversed(names))

    # Afterwards the round behaves like a standard stock round
    standard = StockRound(state)
    standard.setup()
    expected = [standard.next_entity().id for _ in range(3 * size)]
    actual = [stock_round.next_entity().id for _ in range(3 * size)]
    assert actual == expected


def test_direction_switches_exactly_once():
    state = _make_state(["A", "B", "C"])
    stock_round = FirstStockRound(state)
    stock_round.setup()

    switches = 0
    was_reverse = stock_round.reverse
    for _ in range(30):
        index = stock_round.next_entity_index()
        assert 0 <= index < len(stock_round.entities)
        if was_reverse and not stock_round.reverse:
            switches += 1
        was_reverse = stock_round.reverse

    assert switches == 1
    assert isinstance(stock_round.order, ForwardPass)
    assert _ids(stock_round.entities) == ["A", "B", "C"]


def test_setup_without_players_fails():
    state = _make_state([])
    stock_round = FirstStockRound(state)

    with pytest.raises(ConfigurationError):
        stock_round.setup()


def test_standard_round_steps_forward():
    state = _make_state(["A", "B", "C"])
    stock_round = StockRound(state)
    stock_round.setup()

    assert stock_round.current_entity.id == "A"
    assert not stock_round.reverse
    assert [stock_round.next_entity().id for _ in range(4)] == ["B", "C", "A", "B"]
