"""Domain models for the fleet, customers, reservations and invoices.

Vehicles are mutable so that a reservation holding a reference observes status
changes. Everything else is immutable once created.
"""

from dataclasses import dataclass
from datetime import date

from rentals.domain.value_objects import VehicleCategory, VehicleStatus


@dataclass
class Vehicle:
    """A fleet vehicle."""

    id: str
    model: str
    category: VehicleCategory
    status: VehicleStatus = VehicleStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status is VehicleStatus.AVAILABLE

    def __str__(self) -> str:
        return f"{self.id} | {self.model} | {self.category.value} | {self.status.value}"


@dataclass(frozen=True)
class Customer:
    """A registered customer."""

    id: str
    name: str
    contact: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {self.contact}"


@dataclass(frozen=True, eq=False)
class Reservation:
    """An active booking of one vehicle by one customer."""

    booking_id: str
    customer: Customer
    vehicle: Vehicle
    booking_date: date
    rental_start: date
    days: int
    expected_km: int
    deposit_taken: bool = True

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise ValueError("Rental days must be positive")
        if self.expected_km < 0:
            raise ValueError("Expected kilometers cannot be negative")

    def __str__(self) -> str:
        return (
            f"BookingID:{self.booking_id} | {self.customer.name} | Car:{self.vehicle.id}"
            f" | Start:{self.rental_start.isoformat()} | Days:{self.days}"
            f" | ExpKm:{self.expected_km}"
        )


@dataclass(frozen=True)
class Invoice:
    """Priced breakdown of a completed rental."""

    booking_id: str
    actual_km: int
    allowed_km: int
    base_price: float
    extra_km_charge: float
    discount: float
    tax: float
    deposit_deducted: float
    final_payable: float
