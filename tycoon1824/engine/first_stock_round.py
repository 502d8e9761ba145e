"""First stock round handling for Tycoon 1824.

The first stock round is played once in reverse priority order, then in
the standard order until everybody passes. When it ends, unsold mountain
railways and Pre-Staatsbahnen and unfloated coal railways leave the game.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tycoon1824.models.company import Company
    from tycoon1824.models.corporation import Corporation
    from tycoon1824.models.game_state import GameState
    from tycoon1824.models.player import Player

from tycoon1824.errors import ConfigurationError, InvariantViolation
from tycoon1824.models.corporation import BASE_ABILITY

from .stock_round import StockRound


@dataclass(frozen=True)
class ReversePass:
    """Turn order while the round walks backwards through the players.

    Attributes:
        index: Index of the acting player.
        steps_left: Backward steps remaining before the pass is complete.
    """

    index: int
    steps_left: int


@dataclass(frozen=True)
class ForwardPass:
    """Turn order once the reverse pass is over.

    Attributes:
        index: Index of the acting player.
    """

    index: int


TurnOrder = ReversePass | ForwardPass


class FirstStockRound(StockRound):
    """Manages the first stock round.

    Attributes:
        order: Current turn order state. Starts as ReversePass and moves
            to ForwardPass once; never back.
    """

    def __init__(self, state: "GameState") -> None:
        """Initialize first stock round handler.

        Args:
            state: The game state.
        """
        self.order: TurnOrder = ReversePass(index=0, steps_left=0)
        super().__init__(state)

    @property
    def description(self) -> str:
        return "First Stock Round"

    @property
    def entity_index(self) -> int:
        return self.order.index

    @entity_index.setter
    def entity_index(self, value: int) -> None:
        self.order = replace(self.order, index=value)

    @property
    def reverse(self) -> bool:
        """Check if the round is still in its reverse pass."""
        return isinstance(self.order, ReversePass)

    def select_entities(self) -> list["Player"]:
        """Get the players in reverse priority order."""
        return list(reversed(self.state.priority_order()))

    def setup(self) -> None:
        """Start the reverse pass.

        The working list ends up in forward priority order with the index
        left where the base round put it, so walking backwards from it visits
        the last player in priority first.
        """
        self.order = ReversePass(index=0, steps_left=len(self.state.player_order))
        super().setup()
        self.entities.reverse()

    def next_entity_index(self) -> int:
        """Step to the next player.

        Steps backward until every player has acted once, then switches to
        the standard forward order for the rest of the round.

        Returns:
            The new entity index.
        """
        order = self.order
        if isinstance(order, ReversePass):
            if order.steps_left > 0:
                self.order = ReversePass(
                    index=(order.index - 1) % len(self.entities),
                    steps_left=order.steps_left - 1,
                )
                return self.order.index

            self.order = ForwardPass(index=order.index)
            self.entities = self.state.priority_order()
            self.logger.info("Reverse pass complete, continuing in priority order")

        return super().next_entity_index()

    def finish_round(self) -> None:
        """Settle sold out regionals and remove everything left unsold."""
        self.settle_sold_out_regionals()

        self.state.log_line(
            "First stock round is finished - any unsold Pre-State Railways, "
            "Coal Railways, and Mountain Railways are removed from the game"
        )

        self.close_unsold_companies()
        self.close_unfloated_coal_railways()

    def settle_sold_out_regionals(self) -> None:
        """Move the share price of every sold out floated regional."""
        regionals = sorted(
            (
                c
                for c in self.state.corporations.values()
                if c.is_regional and c.floated and not c.closed
            ),
            key=lambda c: c.operating_order,
        )
        for corporation in regionals:
            if not self.sold_out(corporation):
                continue
            prev = corporation.share_price.price
            self.sold_out_stock_movement(corporation)
            self.log_share_price(corporation, prev)

    def close_unsold_companies(self) -> None:
        """Close every private company nobody bought."""
        for company in self.state.companies.values():
            if company.owner_id or company.closed:
                continue

            if company.is_mountain_railway:
                self.state.log_line(f"Mountain Railway {company.name} closes")
                self.state.close_company(company)
            elif company.is_pre_state_control:
                self._close_pre_state(company)
            else:
                self.logger.error(f"Unsold company {company.id} has no expiry rule")
                raise ConfigurationError(
                    f"{company.name} cannot be removed at the end of the "
                    f"{self.description}"
                )

    def close_unfloated_coal_railways(self) -> None:
        """Close every coal railway that did not float.

        The presidency of the associated regional is released and the
        regional may float from now on.
        """
        coal_railways = [
            c for c in self.state.corporations.values() if c.is_coal_railway
        ]
        for coal_railway in coal_railways:
            if coal_railway.floated or coal_railway.closed:
                continue

            regional = self.state.associated_regional_railway(coal_railway)
            self.state.log_line(
                f"{coal_railway.name} closes; {regional.name}'s presidency "
                "share is no longer reserved"
            )

            self.close_corporation(coal_railway)

            president_share = regional.president_share
            if president_share is None:
                self.logger.error(f"{regional.id} has no presidency share to release")
                raise ConfigurationError(f"{regional.id} has no presidency share")
            self.state.set_share_buyable(president_share, True)
            self.state.set_floatable(regional, True)
            for ability in self.state.abilities(regional, BASE_ABILITY):
                self.state.remove_ability(regional, ability)

    def close_corporation(self, corporation: "Corporation") -> None:
        """Release a corporation's home reservation, then close and remove it."""
        self._remove_reservation(corporation)
        self.state.close_corporation(corporation, removed=True)
        self.logger.info(f"{corporation.id} closed and removed from the game")

    def _close_pre_state(self, company: "Company") -> None:
        """Close an unsold Pre-Staatsbahn together with its control private."""
        pre_state = self.state.minor_by_id(company.id)
        state_railway = self.state.associated_state_railway(company)
        self.state.log_line(
            f"Pre-Staatsbahn Railway {pre_state.name} closes; "
            f"corresponding share in {state_railway.name} is no longer reserved"
        )

        self.state.remove_home_token(pre_state)
        self.close_corporation(pre_state)
        self.state.close_company(company)

    def _remove_reservation(self, corporation: "Corporation") -> None:
        """Remove a corporation's reservation on its home tile."""
        hex_ = self.state.home_hex(corporation)
        cities = hex_.tile.cities
        if not cities:
            self.logger.error(f"Home hex {hex_.id} of {corporation.id} has no city")
            raise InvariantViolation(f"Home hex {hex_.id} of {corporation.id} has no city")

        city = next((c for c in cities if c.reserved_by(corporation.id)), None)
        if city is None:
            city = cities[0]
            self.logger.warning(
                f"No city on {hex_.id} is reserved for {corporation.id}, "
                f"falling back to {city.name}"
            )

        self.state.remove_reservation(city, corporation)
