"""Game models for Tycoon 1824."""

from .player import Player
from .company import Company, CompanyType
from .corporation import Ability, Corporation, CorporationType
from .stock import Share, StockMarket, StockPrice
from .tile import Board, City, Hex, Tile
from .game_state import GameState

__all__ = [
    "Player",
    "Company",
    "CompanyType",
    "Ability",
    "Corporation",
    "CorporationType",
    "Share",
    "StockMarket",
    "StockPrice",
    "Board",
    "City",
    "Hex",
    "Tile",
    "GameState",
]
