from rentals.domain.models import Customer, Invoice, Reservation, Vehicle
from rentals.domain.pricing import DEFAULT_RATES, PricingCatalog, calculate_invoice
from rentals.domain.value_objects import CategoryRate, VehicleCategory, VehicleStatus

__all__ = [
    "Customer",
    "Invoice",
    "Reservation",
    "Vehicle",
    "CategoryRate",
    "VehicleCategory",
    "VehicleStatus",
    "DEFAULT_RATES",
    "PricingCatalog",
    "calculate_invoice",
]
