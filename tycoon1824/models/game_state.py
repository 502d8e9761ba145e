"""Game state model for Tycoon 1824."""

import logging
from dataclasses import dataclass, field
from typing import Any

from tycoon1824.errors import ConfigurationError

from .company import Company, create_1824_companies
from .corporation import Ability, Corporation, create_1824_corporations
from .player import Player
from .stock import Share, StockMarket
from .tile import Board, City, Hex

# 1824 starting money based on player count
STARTING_MONEY_1824 = {
    2: 1100,
    3: 830,
    4: 680,
    5: 585,
    6: 510,
}


@dataclass
class GameState:
    """Complete game state for Tycoon 1824.

    All mutations made by the rounds go through the methods of this class,
    so each of them is logged and recorded in the game log.

    Attributes:
        id: Unique game identifier.
        players: Dictionary of player_id to Player.
        player_order: Player IDs in priority order.
        corporations: Dictionary of corporation_id to Corporation.
        companies: Dictionary of company_id to private Company.
        board: The game board.
        stock_market: Stock market rules.
        round_description: Description of the round in progress.
        log: User-visible narrative lines.
        game_log: Structured record of state changes.
    """

    id: str
    players: dict[str, Player] = field(default_factory=dict)
    player_order: list[str] = field(default_factory=list)
    corporations: dict[str, Corporation] = field(default_factory=dict)
    companies: dict[str, Company] = field(default_factory=dict)
    board: Board = field(default_factory=Board)
    stock_market: StockMarket = field(default_factory=StockMarket)
    round_description: str = ""
    log: list[str] = field(default_factory=list)
    game_log: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Post-initialization setup."""
        self.logger = logging.getLogger(__name__)

    def add_player(self, player: Player) -> None:
        """Add a player to the game."""
        self.players[player.id] = player
        self.player_order.append(player.id)
        self.logger.info(f"Player {player.name} ({player.id}) added to game {self.id}")

    def priority_order(self) -> list[Player]:
        """Get the players in standard priority order."""
        return [self.players[player_id] for player_id in self.player_order]

    def initialize_game(self) -> None:
        """Initialize a new game of 1824."""
        player_count = len(self.players)
        if player_count not in STARTING_MONEY_1824:
            self.logger.error(f"Cannot start game {self.id} with {player_count} players")
            raise ConfigurationError(f"Invalid player count: {player_count}")

        self.logger.info(f"Initializing game {self.id} with {player_count} players")

        self.corporations = create_1824_corporations()
        self.companies = create_1824_companies()
        self.board = Board()

        # Reserve home cities
        for corporation in self.corporations.values():
            if corporation.coordinates is None:
                continue
            city = self.home_city(corporation)
            city.add_reservation(corporation.id)

        starting_money = STARTING_MONEY_1824[player_count]
        for player in self.players.values():
            player.cash = starting_money

        self.log_event("game_start", {"player_count": player_count})
        self.logger.info(
            f"Game {self.id} initialized with {len(self.corporations)} corporations "
            f"and {len(self.companies)} private companies, {starting_money}G each"
        )

    # Lookups

    def minor_by_id(self, minor_id: str) -> Corporation:
        """Get the Pre-Staatsbahn minor with the given id."""
        minor = self.corporations.get(minor_id)
        if minor is None or not minor.is_pre_state:
            self.logger.error(f"No Pre-Staatsbahn with id {minor_id}")
            raise ConfigurationError(f"No Pre-Staatsbahn with id {minor_id}")
        return minor

    def associated_state_railway(self, entity: Corporation | Company) -> Corporation:
        """Get the state railway a Pre-Staatsbahn (or its control private) merges into."""
        minor = entity if isinstance(entity, Corporation) else self.minor_by_id(entity.id)
        state = self.corporations.get(minor.state_railway_id or "")
        if state is None or not state.is_state_railway:
            self.logger.error(f"{minor.id} has no associated state railway")
            raise ConfigurationError(f"{minor.id} has no associated state railway")
        return state

    def associated_regional_railway(self, coal_railway: Corporation) -> Corporation:
        """Get the regional whose presidency a coal railway reserves."""
        regional = self.corporations.get(coal_railway.regional_id or "")
        if regional is None or not regional.is_regional:
            self.logger.error(f"{coal_railway.id} has no associated regional railway")
            raise ConfigurationError(
                f"{coal_railway.id} has no associated regional railway"
            )
        return regional

    def hex_by_id(self, hex_id: str) -> Hex:
        """Get a hex by coordinate."""
        return self.board.get_hex(hex_id)

    def home_hex(self, corporation: Corporation) -> Hex:
        """Get the hex holding a corporation's home city."""
        if corporation.coordinates is None:
            self.logger.error(f"{corporation.id} has no home coordinate")
            raise ConfigurationError(f"{corporation.id} has no home coordinate")
        return self.hex_by_id(corporation.coordinates)

    def home_city(self, corporation: Corporation) -> City:
        """Get the configured home city of a corporation."""
        cities = self.home_hex(corporation).tile.cities
        if corporation.home_city >= len(cities):
            self.logger.error(
                f"{corporation.id} home city {corporation.home_city} "
                f"not on {corporation.coordinates}"
            )
            raise ConfigurationError(
                f"{corporation.id} home city {corporation.home_city} "
                f"not on {corporation.coordinates}"
            )
        return cities[corporation.home_city]

    def abilities(self, corporation: Corporation, ability_type: str) -> list[Ability]:
        """Get a corporation's abilities of one type."""
        return corporation.abilities_of(ability_type)

    # Mutations

    def close_corporation(self, corporation: Corporation, removed: bool = False) -> None:
        """Close a corporation, optionally removing it from the game."""
        corporation.close()
        if removed:
            corporation.removed = True
        self.logger.debug(f"Corporation {corporation.id} closed (removed={removed})")
        self.log_event(
            "corporation_closed",
            {"corporation_id": corporation.id, "removed": removed},
        )

    def close_company(self, company: Company) -> None:
        """Close a private company."""
        company.close()
        self.logger.debug(f"Company {company.id} closed")
        self.log_event("company_closed", {"company_id": company.id})

    def set_share_buyable(self, share: Share, buyable: bool) -> None:
        """Reserve or release a share."""
        share.buyable = buyable
        self.logger.debug(
            f"{share.corporation_id} {share.percent}% share buyable={buyable}"
        )
        self.log_event(
            "share_buyable",
            {
                "corporation_id": share.corporation_id,
                "president": share.president,
                "buyable": buyable,
            },
        )

    def set_floatable(self, corporation: Corporation, floatable: bool) -> None:
        """Allow or forbid a corporation to float."""
        corporation.floatable = floatable
        self.logger.debug(f"{corporation.id} floatable={floatable}")
        self.log_event(
            "floatable",
            {"corporation_id": corporation.id, "floatable": floatable},
        )

    def remove_ability(self, corporation: Corporation, ability: Ability) -> None:
        """Remove an ability from a corporation."""
        corporation.remove_ability(ability)
        self.logger.debug(f"{corporation.id} lost {ability.ability_type} ability")
        self.log_event(
            "ability_removed",
            {"corporation_id": corporation.id, "ability_type": ability.ability_type},
        )

    def remove_reservation(self, city: City, corporation: Corporation) -> str:
        """Release a corporation's reserved slot in a city.

        Returns:
            Id of the corporation whose reservation was released.
        """
        released = city.remove_reservation(corporation.id)
        self.logger.debug(f"Reservation for {released} in {city.name} removed")
        self.log_event(
            "reservation_removed",
            {"corporation_id": released, "city": city.name},
        )
        return released

    def place_home_token(self, corporation: Corporation) -> bool:
        """Place a corporation's station token in its home city."""
        city = self.home_city(corporation)
        if not city.place_token(corporation.id):
            return False
        corporation.tokens.append(corporation.coordinates)
        self.logger.debug(f"{corporation.id} placed home token in {city.name}")
        self.log_event(
            "token_placed",
            {"corporation_id": corporation.id, "city": city.name},
        )
        return True

    def remove_home_token(self, corporation: Corporation) -> bool:
        """Remove a corporation's station token from its home city.

        Returns:
            True if a token was removed.
        """
        if corporation.coordinates not in corporation.tokens:
            return False
        city = self.home_city(corporation)
        if not city.remove_token(corporation.id):
            return False
        corporation.tokens.remove(corporation.coordinates)
        self.logger.debug(f"Home token of {corporation.id} removed from {city.name}")
        self.log_event(
            "token_removed",
            {"corporation_id": corporation.id, "city": city.name},
        )
        return True

    # Logging

    def log_line(self, message: str) -> None:
        """Add a line to the user-visible game log."""
        self.log.append(message)
        self.logger.info(message)

    def log_event(self, event_type: str, data: dict[str, Any]) -> None:
        """Record a game event."""
        self.game_log.append(
            {
                "type": event_type,
                "data": data,
                "round": self.round_description,
            }
        )
