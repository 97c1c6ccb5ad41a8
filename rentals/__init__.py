from rentals.config import BookingPolicy
from rentals.domain import (
    Customer,
    Invoice,
    PricingCatalog,
    Reservation,
    Vehicle,
    VehicleCategory,
    VehicleStatus,
)
from rentals.services import BookingService

__all__ = [
    "BookingPolicy",
    "BookingService",
    "Customer",
    "Invoice",
    "PricingCatalog",
    "Reservation",
    "Vehicle",
    "VehicleCategory",
    "VehicleStatus",
]
