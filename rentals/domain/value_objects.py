"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from rentals.const import BOOKING_ID_LENGTH


class VehicleCategory(Enum):
    """Pricing category of a vehicle."""

    COMPACT_PETROL = "COMPACT_PETROL"
    HYBRID = "HYBRID"
    ELECTRIC = "ELECTRIC"
    LUXURY_SUV = "LUXURY_SUV"


class VehicleStatus(Enum):
    """Availability of a vehicle."""

    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    UNDER_MAINTENANCE = "UNDER_MAINTENANCE"


@dataclass(frozen=True)
class CategoryRate:
    """Pricing rules for one vehicle category."""

    daily_rate: int
    free_km_per_day: int
    extra_km_charge: int
    tax_rate: float

    def __post_init__(self) -> None:
        if self.daily_rate < 0:
            raise ValueError("Daily rate cannot be negative")
        if self.free_km_per_day < 0:
            raise ValueError("Free kilometer allowance cannot be negative")
        if self.extra_km_charge < 0:
            raise ValueError("Extra kilometer charge cannot be negative")
        if not 0 <= self.tax_rate <= 1:
            raise ValueError("Tax rate must be between 0 and 1")


def new_booking_id(length: int = BOOKING_ID_LENGTH) -> str:
    """Return a random uppercase booking token."""
    return uuid4().hex[:length].upper()


def normalize_booking_id(booking_id: str) -> str:
    return booking_id.strip().upper()
