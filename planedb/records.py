"""Record types for the FAA aircraft reference and registration files"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

# FAA ACFTREF aircraft category codes
CATEGORY_NAMES = [
    "None",
    "Glider",
    "Balloon",
    "Blimp/Dirigible",
    "Fixed wing single engine",
    "Fixed wing multi engine",
    "Rotorcraft",
    "Weight-shift-control",
    "Powered Parachute",
    "Gyroplane",
]

UNKNOWN_CATEGORY = "Unknown"


def get_category_name(category: int) -> str:
    """Get the category description for an ACFTREF category code

    Args:
        category: Numeric category code from the type file

    Returns:
        Category description, or "Unknown" for codes outside the table
    """
    if 0 <= category < len(CATEGORY_NAMES):
        return CATEGORY_NAMES[category]
    return UNKNOWN_CATEGORY


@dataclass(frozen=True)
class TypeRecord:
    """One aircraft type from the reference file"""
    id: int  # manufacturer, model and series code
    manufacturer: Optional[str]
    model: Optional[str]
    category: int
    seat_count: int

    @property
    def category_name(self) -> str:
        return get_category_name(self.category)


@dataclass(frozen=True)
class RegistrationRecord:
    """One registered aircraft from the master file"""
    id: int  # ICAO 24-bit address
    tail_number: str  # N-Number without the leading "N"
    type_id: int  # key into the type catalog
    registrant_name: Optional[str]

    @property
    def icao_hex(self) -> str:
        return f"{self.id:06X}"


RecordT = TypeVar("RecordT")


@dataclass
class LoadResult(Generic[RecordT]):
    """Records read from one source file, in file order"""
    records: List[RecordT] = field(default_factory=list)
    lines_read: int = 0
    skipped: int = 0  # lines rejected as too short
