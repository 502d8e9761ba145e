"""Private company model for Tycoon 1824."""

from dataclasses import dataclass
from enum import Enum


class CompanyType(Enum):
    """Category of a private company."""

    MOUNTAIN_RAILWAY = "mountain_railway"
    PRE_STATE_CONTROL = "pre_state_control"  # Controls the Pre-Staatsbahn of same id
    OTHER = "other"


# 1824 private companies with their face values
COMPANIES_1824 = {
    "B1": {"name": "Semmeringbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "B2": {"name": "Arlbergbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "B3": {"name": "Brennerbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "B4": {"name": "Tauernbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "B5": {"name": "Karawankenbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "B6": {"name": "Pyhrnbahn", "type": CompanyType.MOUNTAIN_RAILWAY, "value": 120},
    "UG1": {"name": "UG1 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 240},
    "UG2": {"name": "UG2 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 120},
    "KK1": {"name": "KK1 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 240},
    "KK2": {"name": "KK2 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 120},
    "SD1": {"name": "SD1 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 240},
    "SD2": {"name": "SD2 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 120},
    "SD3": {"name": "SD3 Control", "type": CompanyType.PRE_STATE_CONTROL, "value": 120},
}


@dataclass
class Company:
    """Represents a private company in 1824.

    Attributes:
        id: Company identifier (e.g., 'B1', 'KK1').
        name: Full company name.
        company_type: Category of the company.
        value: Face value in gulden.
        owner_id: Id of the owning player or corporation, None if unsold.
        closed: Whether the company has closed.
    """

    id: str
    name: str
    company_type: CompanyType
    value: int = 0
    owner_id: str | None = None
    closed: bool = False

    @property
    def is_mountain_railway(self) -> bool:
        return self.company_type == CompanyType.MOUNTAIN_RAILWAY

    @property
    def is_pre_state_control(self) -> bool:
        return self.company_type == CompanyType.PRE_STATE_CONTROL

    def close(self) -> None:
        """Close the company."""
        self.closed = True


def create_1824_companies() -> dict[str, Company]:
    """Create all private companies for an 1824 game."""
    companies = {}
    for company_id, info in COMPANIES_1824.items():
        companies[company_id] = Company(
            id=company_id,
            name=info["name"],
            company_type=info["type"],
            value=info["value"],
        )
    return companies
