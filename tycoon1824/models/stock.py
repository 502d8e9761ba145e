"""Stock model for Tycoon 1824."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .corporation import Corporation

# Share holders other than players
IPO = "ipo"
MARKET = "market"

# 1824 stock price chart, flattened to a single row
STOCK_PRICES_1824 = [
    40,
    45,
    50,
    55,
    60,
    65,
    70,
    76,
    82,
    90,
    100,
    110,
    120,
    132,
    144,
    156,
    170,
    184,
    200,
    220,
    240,
    260,
    280,
    300,
    330,
    360,
    400,
]


@dataclass(frozen=True)
class StockPrice:
    """Represents a position on the stock price chart.

    Attributes:
        index: Position on the stock price chart.
        price: Actual price value at this position.
    """

    index: int
    price: int

    @classmethod
    def from_index(cls, index: int) -> StockPrice:
        """Create StockPrice from chart index."""
        if index < 0:
            index = 0
        if index >= len(STOCK_PRICES_1824):
            index = len(STOCK_PRICES_1824) - 1
        return cls(index=index, price=STOCK_PRICES_1824[index])

    @classmethod
    def from_price(cls, price: int) -> StockPrice:
        """Create StockPrice from a price value (finds closest)."""
        if price in STOCK_PRICES_1824:
            index = STOCK_PRICES_1824.index(price)
        else:
            index = min(
                range(len(STOCK_PRICES_1824)),
                key=lambda i: abs(STOCK_PRICES_1824[i] - price),
            )
        return cls(index=index, price=STOCK_PRICES_1824[index])


@dataclass
class Share:
    """A certificate of corporation equity.

    Attributes:
        corporation_id: Corporation this share belongs to.
        percent: Percentage of the corporation this share represents.
        president: Whether this is the presidency share.
        buyable: False while the share is held in reserve.
        holder: IPO, MARKET or the id of the owning player.
    """

    corporation_id: str
    percent: int = 10
    president: bool = False
    buyable: bool = True
    holder: str = IPO

    @property
    def held_by_player(self) -> bool:
        """Check if a player holds this share."""
        return self.holder not in (IPO, MARKET)


class StockMarket:
    """Moves share prices on the 1824 chart."""

    def is_sold_out(self, corporation: Corporation) -> bool:
        """Check if every share of a corporation is held by players."""
        if not corporation.shares:
            return False
        return all(share.held_by_player for share in corporation.shares)

    def move_up(self, corporation: Corporation, steps: int = 1) -> StockPrice:
        """Move a corporation's share price up the chart.

        Args:
            corporation: Corporation whose price moves.
            steps: Number of chart positions to move.

        Returns:
            The new share price.
        """
        if corporation.share_price is None:
            raise ValueError(f"{corporation.id} has no share price")
        corporation.share_price = StockPrice.from_index(
            corporation.share_price.index + steps
        )
        return corporation.share_price
