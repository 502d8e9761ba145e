"""Round engine for Tycoon 1824."""

from .stock_round import StockRound
from .first_stock_round import FirstStockRound, ForwardPass, ReversePass

__all__ = [
    "StockRound",
    "FirstStockRound",
    "ForwardPass",
    "ReversePass",
]
