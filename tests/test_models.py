"""Tests for the Tycoon 1824 game models."""

import logging

import pytest

from tycoon1824.errors import ConfigurationError, InvariantViolation
from tycoon1824.models.corporation import BASE_ABILITY
from tycoon1824.models.game_state import GameState
from tycoon1824.models.player import Player
from tycoon1824.models.stock import IPO, MARKET, STOCK_PRICES_1824, StockPrice
from tycoon1824.models.tile import Board, City


def _make_game(player_count: int = 4) -> GameState:
    state = GameState(id="test_models")
    for i in range(1, player_count + 1):
        state.add_player(Player(id=f"p{i}", name=f"Player {i}"))
    state.initialize_game()
    return state


def test_city_removes_exact_reservation():
    city = City(name="Prag", slots=2, reservations=["BK", "EPP"])

    assert city.remove_reservation("EPP") == "EPP"
    assert city.reservations == ["BK"]


def test_city_falls_back_to_first_reservation():
    city = City(name="Prag", slots=2, reservations=["BK", "EPP"])

    assert city.remove_reservation("KK1") == "BK"
    assert city.reservations == ["EPP"]


def test_city_without_reservations_fails(caplog):
    city = City(name="Prag")

    with caplog.at_level(logging.ERROR), pytest.raises(InvariantViolation):
        city.remove_reservation("BK")

    assert caplog.records[-1].levelno == logging.ERROR


def test_home_token_fills_its_reserved_slot():
    city = City(name="Graz", slots=1)
    city.add_reservation("SD2")

    assert city.place_token("SD2")
    assert city.occupied == 1
    assert not city.place_token("SD3")
    with pytest.raises(ConfigurationError):
        city.add_reservation("SD3")
    assert city.remove_token("SD2")
    assert not city.remove_token("SD2")


def test_board_unknown_hex_fails(caplog):
    board = Board()

    assert board.get_hex("E12").tile.cities[1].name == "Wien Süd"
    with caplog.at_level(logging.ERROR), pytest.raises(ConfigurationError):
        board.get_hex("Z1")

    assert "Z1" in caplog.records[-1].getMessage()


def test_stock_price_chart_bounds():
    assert StockPrice.from_price(100).index == STOCK_PRICES_1824.index(100)
    assert StockPrice.from_price(101).price == 100
    assert StockPrice.from_index(-3).price == STOCK_PRICES_1824[0]
    assert StockPrice.from_index(999).price == STOCK_PRICES_1824[-1]


def test_sold_out_and_price_movement():
    state = _make_game()
    bk = state.corporations["BK"]
    bk.share_price = StockPrice.from_price(100)

    assert not state.stock_market.is_sold_out(bk)

    for share in bk.shares:
        share.holder = "p2"
    assert state.stock_market.is_sold_out(bk)

    bk.shares[3].holder = MARKET
    assert not state.stock_market.is_sold_out(bk)

    assert state.stock_market.move_up(bk).price == 110

    bk.share_price = StockPrice.from_index(len(STOCK_PRICES_1824) - 1)
    assert state.stock_market.move_up(bk).price == STOCK_PRICES_1824[-1]


def test_initialize_game_reserves_home_cities():
    state = _make_game()

    wien = state.board.get_hex("E12").tile.cities
    assert wien[0].reservations == ["KK1"]
    assert wien[1].reservations == ["SD1"]
    assert state.board.get_hex("C6").tile.cities[0].reserved_by("EPP")
    assert all(p.cash == 680 for p in state.players.values())
    assert state.game_log[0]["type"] == "game_start"


def test_coal_railways_reserve_regional_presidency():
    state = _make_game()

    bk = state.corporations["BK"]
    assert not bk.floatable
    assert not bk.president_share.buyable
    assert bk.president_share.holder == IPO
    assert len(state.abilities(bk, BASE_ABILITY)) == 1

    bh = state.corporations["BH"]
    assert bh.floatable
    assert bh.president_share.buyable
    assert state.abilities(bh, BASE_ABILITY) == []


@pytest.mark.parametrize("player_count", [0, 1, 7])
def test_initialize_game_rejects_player_count(player_count):
    state = GameState(id="test_count")
    for i in range(player_count):
        state.add_player(Player(id=f"p{i}", name=f"Player {i}"))

    with pytest.raises(ConfigurationError):
        state.initialize_game()


def test_link_lookups():
    state = _make_game()

    assert state.minor_by_id("UG2").id == "UG2"
    assert state.associated_state_railway(state.companies["SD3"]).id == "SD"
    assert state.associated_state_railway(state.corporations["KK2"]).id == "KK"
    assert state.associated_regional_railway(state.corporations["MLB"]).id == "CL"

    with pytest.raises(ConfigurationError):
        state.minor_by_id("BK")
    with pytest.raises(ConfigurationError):
        state.associated_regional_railway(state.corporations["BK"])


def test_mutations_are_recorded():
    state = _make_game()
    state.round_description = "First Stock Round"
    bk = state.corporations["BK"]

    state.set_floatable(bk, True)
    state.set_share_buyable(bk.president_share, True)
    for ability in state.abilities(bk, BASE_ABILITY):
        state.remove_ability(bk, ability)
    state.close_corporation(bk, removed=True)
    state.close_company(state.companies["B1"])

    events = [e["type"] for e in state.game_log[1:]]
    assert events == [
        "floatable",
        "share_buyable",
        "ability_removed",
        "corporation_closed",
        "company_closed",
    ]
    assert all(e["round"] == "First Stock Round" for e in state.game_log[1:])
    assert bk.closed and bk.removed
