"""Corporation model for Tycoon 1824."""

from dataclasses import dataclass, field
from enum import Enum

from .stock import Share, StockPrice


class CorporationType(Enum):
    """Category of a tradeable corporation."""

    REGIONAL = "regional"
    COAL_RAILWAY = "coal_railway"
    PRE_STATE = "pre_state"  # Pre-Staatsbahn minor
    STATE_RAILWAY = "state_railway"


# Ability type held by a regional while its presidency is reserved
BASE_ABILITY = "base"

# 1824 corporations with their home hexes and links
CORPORATIONS_1824 = {
    # Regionals
    "BK": {
        "name": "Böhmische Kommerzbahn",
        "type": CorporationType.REGIONAL,
        "coordinates": "B9",
    },
    "MS": {
        "name": "Mährisch-Schlesische Eisenbahn",
        "type": CorporationType.REGIONAL,
        "coordinates": "B13",
    },
    "CL": {
        "name": "Carl Ludwig-Bahn",
        "type": CorporationType.REGIONAL,
        "coordinates": "A16",
    },
    "SB": {
        "name": "Siebenbürgische Bahn",
        "type": CorporationType.REGIONAL,
        "coordinates": "G24",
    },
    "BH": {
        "name": "Bosnisch-Herzegowinische Landesbahn",
        "type": CorporationType.REGIONAL,
        "coordinates": "J12",
    },
    # Coal railways, each reserving the presidency of a regional
    "EPP": {
        "name": "Eisenbahn Pilsen - Priesen",
        "type": CorporationType.COAL_RAILWAY,
        "coordinates": "C6",
        "regional": "BK",
    },
    "EOD": {
        "name": "Eisenbahn Oderberg - Dombran",
        "type": CorporationType.COAL_RAILWAY,
        "coordinates": "A12",
        "regional": "MS",
    },
    "MLB": {
        "name": "Mosty - Lemberg Bahn",
        "type": CorporationType.COAL_RAILWAY,
        "coordinates": "A22",
        "regional": "CL",
    },
    "SPB": {
        "name": "Simeria - Petrosani Bahn",
        "type": CorporationType.COAL_RAILWAY,
        "coordinates": "H22",
        "regional": "SB",
    },
    # Pre-Staatsbahnen, each merging into a state railway
    "UG1": {
        "name": "UG1",
        "type": CorporationType.PRE_STATE,
        "coordinates": "F17",
        "state": "UG",
    },
    "UG2": {
        "name": "UG2",
        "type": CorporationType.PRE_STATE,
        "coordinates": "G18",
        "state": "UG",
    },
    "KK1": {
        "name": "KK1",
        "type": CorporationType.PRE_STATE,
        "coordinates": "E12",
        "state": "KK",
    },
    "KK2": {
        "name": "KK2",
        "type": CorporationType.PRE_STATE,
        "coordinates": "C12",
        "state": "KK",
    },
    "SD1": {
        "name": "SD1",
        "type": CorporationType.PRE_STATE,
        "coordinates": "E12",
        "city": 1,
        "state": "SD",
    },
    "SD2": {
        "name": "SD2",
        "type": CorporationType.PRE_STATE,
        "coordinates": "F9",
        "state": "SD",
    },
    "SD3": {
        "name": "SD3",
        "type": CorporationType.PRE_STATE,
        "coordinates": "H4",
        "state": "SD",
    },
    # State railways, formed later from their Pre-Staatsbahnen
    "UG": {"name": "Ungarische Staatsbahn", "type": CorporationType.STATE_RAILWAY},
    "KK": {"name": "k.k. Staatsbahn", "type": CorporationType.STATE_RAILWAY},
    "SD": {"name": "Südbahn", "type": CorporationType.STATE_RAILWAY},
}


@dataclass
class Ability:
    """A capability attached to a corporation.

    Attributes:
        ability_type: Kind of ability (e.g. 'base').
        description: Human readable explanation.
    """

    ability_type: str
    description: str = ""


@dataclass
class Corporation:
    """Represents a tradeable corporation in 1824.

    Attributes:
        id: Corporation abbreviation (e.g., 'BK', 'EPP').
        name: Full corporation name.
        corporation_type: Category of the corporation.
        coordinates: Hex id of the home city (None for state railways).
        home_city: Index of the home city on the home tile.
        floated: Whether the corporation has floated.
        floatable: Whether the corporation may float at all.
        closed: Whether the corporation has closed.
        removed: Whether the corporation was removed from the game.
        share_price: Current position on the stock chart.
        shares: Certificates of this corporation.
        abilities: Abilities currently held.
        tokens: Hex ids where station tokens are placed.
        state_railway_id: State railway a Pre-Staatsbahn merges into.
        regional_id: Regional whose presidency a coal railway reserves.
    """

    id: str
    name: str
    corporation_type: CorporationType
    coordinates: str | None = None
    home_city: int = 0
    floated: bool = False
    floatable: bool = True
    closed: bool = False
    removed: bool = False
    share_price: StockPrice | None = None
    shares: list[Share] = field(default_factory=list)
    abilities: list[Ability] = field(default_factory=list)
    tokens: list[str] = field(default_factory=list)
    state_railway_id: str | None = None
    regional_id: str | None = None

    @property
    def is_regional(self) -> bool:
        return self.corporation_type == CorporationType.REGIONAL

    @property
    def is_coal_railway(self) -> bool:
        return self.corporation_type == CorporationType.COAL_RAILWAY

    @property
    def is_pre_state(self) -> bool:
        return self.corporation_type == CorporationType.PRE_STATE

    @property
    def is_state_railway(self) -> bool:
        return self.corporation_type == CorporationType.STATE_RAILWAY

    @property
    def president_share(self) -> Share | None:
        """Get the presidency share, if the corporation has one."""
        for share in self.shares:
            if share.president:
                return share
        return None

    @property
    def operating_order(self) -> tuple[int, str]:
        """Sort key: highest share price first, then by id."""
        price = self.share_price.price if self.share_price else 0
        return (-price, self.id)

    def close(self) -> None:
        """Close the corporation."""
        self.closed = True

    def abilities_of(self, ability_type: str) -> list[Ability]:
        """Get all abilities of a given type."""
        return [a for a in self.abilities if a.ability_type == ability_type]

    def remove_ability(self, ability: Ability) -> None:
        """Remove a single ability from the corporation."""
        if ability in self.abilities:
            self.abilities.remove(ability)


def _create_shares(corporation_id: str, corporation_type: CorporationType) -> list[Share]:
    """Create the certificates for a corporation."""
    if corporation_type in (CorporationType.COAL_RAILWAY, CorporationType.PRE_STATE):
        # Minors have a single 100% certificate
        return [Share(corporation_id=corporation_id, percent=100, president=True)]

    shares = [Share(corporation_id=corporation_id, percent=20, president=True)]
    shares.extend(Share(corporation_id=corporation_id) for _ in range(8))
    return shares


def create_1824_corporations() -> dict[str, Corporation]:
    """Create all corporations for an 1824 game."""
    corporations = {}
    for corporation_id, info in CORPORATIONS_1824.items():
        corporations[corporation_id] = Corporation(
            id=corporation_id,
            name=info["name"],
            corporation_type=info["type"],
            coordinates=info.get("coordinates"),
            home_city=info.get("city", 0),
            shares=_create_shares(corporation_id, info["type"]),
            state_railway_id=info.get("state"),
            regional_id=info.get("regional"),
        )

    # Regionals linked to a coal railway hold their presidency in reserve
    for corporation in corporations.values():
        if not corporation.is_coal_railway:
            continue
        regional = corporations[corporation.regional_id]
        regional.floatable = False
        regional.president_share.buyable = False
        regional.abilities.append(
            Ability(
                ability_type=BASE_ABILITY,
                description=f"Presidency reserved for {corporation.id}",
            )
        )

    return corporations
