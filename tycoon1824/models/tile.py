"""Tile and board models for Tycoon 1824."""

import logging
from dataclasses import dataclass, field

from tycoon1824.errors import ConfigurationError, InvariantViolation

logger = logging.getLogger(__name__)


@dataclass
class City:
    """Represents a city on a tile.

    Attributes:
        name: Name of the city.
        slots: Number of station token slots.
        reservations: Corporation ids holding a reserved slot here.
        tokens: Corporation ids with tokens here.
    """

    name: str
    slots: int = 1
    reservations: list[str] = field(default_factory=list)
    tokens: list[str] = field(default_factory=list)

    @property
    def occupied(self) -> int:
        """Number of slots taken by reservations or tokens.

        A home token placed in its reserved slot counts once.
        """
        return len(set(self.reservations) | set(self.tokens))

    def reserved_by(self, corporation_id: str) -> bool:
        """Check if a corporation holds a reservation here."""
        return corporation_id in self.reservations

    def add_reservation(self, corporation_id: str) -> None:
        """Reserve a slot for a corporation's home token."""
        if self.occupied >= self.slots:
            logger.error(f"{self.name} is full, cannot reserve for {corporation_id}")
            raise ConfigurationError(
                f"No free slot in {self.name} to reserve for {corporation_id}"
            )
        self.reservations.append(corporation_id)

    def remove_reservation(self, corporation_id: str) -> str:
        """Remove the reservation held by a corporation.

        Falls back to the first reservation of this city when the
        corporation holds none here.

        Args:
            corporation_id: Corporation whose reservation is released.

        Returns:
            Id of the corporation whose reservation was removed.
        """
        if corporation_id in self.reservations:
            self.reservations.remove(corporation_id)
            return corporation_id

        if not self.reservations:
            logger.error(f"{self.name} has no reservation to release for {corporation_id}")
            raise InvariantViolation(
                f"{self.name} has no reservation to release for {corporation_id}"
            )

        released = self.reservations.pop(0)
        logger.warning(
            f"{corporation_id} holds no reservation in {self.name}, "
            f"released {released} instead"
        )
        return released

    def place_token(self, corporation_id: str) -> bool:
        """Place a station token for a corporation."""
        if corporation_id in self.tokens:
            return False
        if corporation_id not in self.reservations and self.occupied >= self.slots:
            return False
        self.tokens.append(corporation_id)
        return True

    def remove_token(self, corporation_id: str) -> bool:
        """Remove a corporation's station token."""
        if corporation_id not in self.tokens:
            return False
        self.tokens.remove(corporation_id)
        return True


@dataclass
class Tile:
    """Represents the tile lying on a hex.

    Attributes:
        name: Tile name (preprinted tiles use the hex id).
        cities: Cities on this tile.
    """

    name: str
    cities: list[City] = field(default_factory=list)


@dataclass
class Hex:
    """Represents a hex on the board.

    Attributes:
        id: Hex coordinate (e.g., 'E12').
        tile: Tile currently lying on the hex.
    """

    id: str
    tile: Tile


# Home cities in 1824 Austria-Hungary, keyed by hex coordinate
CITIES_1824 = {
    "A12": {"cities": ["Oderberg"], "slots": 1},
    "A16": {"cities": ["Krakau"], "slots": 2},
    "A22": {"cities": ["Lemberg"], "slots": 2},
    "B9": {"cities": ["Prag"], "slots": 2},
    "B13": {"cities": ["Olmütz"], "slots": 1},
    "C6": {"cities": ["Pilsen"], "slots": 1},
    "C12": {"cities": ["Brünn"], "slots": 2},
    "E12": {"cities": ["Wien West", "Wien Süd"], "slots": 2},
    "F9": {"cities": ["Graz"], "slots": 2},
    "F17": {"cities": ["Budapest"], "slots": 2},
    "G18": {"cities": ["Szegedin"], "slots": 1},
    "G24": {"cities": ["Kronstadt"], "slots": 1},
    "H4": {"cities": ["Triest"], "slots": 2},
    "H22": {"cities": ["Petrosani"], "slots": 1},
    "J12": {"cities": ["Sarajevo"], "slots": 1},
}


class Board:
    """Represents the game board for 1824.

    Attributes:
        hexes: Dictionary of hex coordinate to Hex.
    """

    def __init__(self) -> None:
        """Initialize the 1824 board."""
        self.hexes: dict[str, Hex] = {}
        self._initialize_board()

    def _initialize_board(self) -> None:
        """Lay the preprinted city tiles."""
        for hex_id, info in CITIES_1824.items():
            cities = [City(name=name, slots=info["slots"]) for name in info["cities"]]
            self.hexes[hex_id] = Hex(id=hex_id, tile=Tile(name=hex_id, cities=cities))

    def get_hex(self, hex_id: str) -> Hex:
        """Get a hex by its coordinate.

        Raises:
            ConfigurationError: If no hex exists at the coordinate.
        """
        hex_ = self.hexes.get(hex_id)
        if hex_ is None:
            logger.error(f"No hex at {hex_id} on the board")
            raise ConfigurationError(f"No hex at {hex_id}")
        return hex_
