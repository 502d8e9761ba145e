"""State renderer for Tycoon 1824 visualization."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tycoon1824.engine.stock_round import StockRound
    from tycoon1824.models.game_state import GameState


class StateRenderer:
    """Renders text snapshots of the game state.

    Attributes:
        state: Reference to game state.
        stock_round: Round in progress, if any.
    """

    def __init__(
        self, state: "GameState", stock_round: "StockRound | None" = None
    ) -> None:
        """Initialize state renderer.

        Args:
            state: The game state to render.
            stock_round: The round in progress.
        """
        self.state = state
        self.stock_round = stock_round

    def render_full_snapshot(self) -> str:
        """Render complete game state snapshot.

        Returns:
            Formatted string with complete game state.
        """
        sections = [
            self._render_header(),
            self.render_turn_order(),
            self._render_corporations(),
            self._render_companies(),
        ]

        return "\n\n".join(sections)

    def _render_header(self) -> str:
        """Render game header."""
        round_name = self.state.round_description or "Setup"
        return f"═══════════════════════════════════\n🎮 Tycoon 1824 | {round_name}\n═══════════════════════════════════"

    def render_turn_order(self) -> str:
        """Render the players in turn order, marking the acting player.

        Returns:
            Formatted turn order.
        """
        if self.stock_round is None or not self.stock_round.entities:
            return "⏳ Waiting for round to start..."

        direction = "⬅️ reverse" if self.stock_round.reverse else "➡️ forward"
        lines = [f"🔁 Turn order ({direction}):"]

        current = self.stock_round.current_entity
        for player in self.stock_round.entities:
            marker = "▶" if current and player.id == current.id else " "
            lines.append(f"{marker} {player.name}: {player.cash}G")

        return "\n".join(lines)

    def _render_corporations(self) -> str:
        """Render corporation status."""
        lines = ["🚂 Corporations:"]

        for corporation in sorted(
            self.state.corporations.values(), key=lambda c: c.operating_order
        ):
            if corporation.removed:
                status = "removed"
            elif corporation.closed:
                status = "closed"
            elif corporation.floated:
                status = "floated"
            elif corporation.floatable:
                status = "unfloated"
            else:
                status = "reserved"

            price = f"{corporation.share_price.price}G" if corporation.share_price else "-"
            lines.append(f"  {corporation.id} | {status} | {price}")

        return "\n".join(lines)

    def _render_companies(self) -> str:
        """Render private company status."""
        lines = ["📜 Private Companies:"]

        for company in self.state.companies.values():
            owner = self.state.players.get(company.owner_id or "")
            owner_name = owner.name if owner else company.owner_id or "unsold"
            status = "closed" if company.closed else "open"
            lines.append(f"  {company.id} {company.name} | {owner_name} | {status}")

        return "\n".join(lines)

    def render_log(self, limit: int = 10) -> str:
        """Render the most recent game log lines.

        Args:
            limit: Maximum number of lines to show.

        Returns:
            Formatted log tail.
        """
        lines = ["📝 Log:"]
        lines.extend(f"  {line}" for line in self.state.log[-limit:])
        return "\n".join(lines)
