"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from rentals import BookingService, VehicleCategory

TODAY = date(2026, 3, 2)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def service() -> BookingService:
    svc = BookingService(keep_invoice_history=True)
    svc.register_customer("NIC-1001", "Amal Perera", "0771234567", "amal@example.com")
    svc.register_customer("NIC-1002", "Nadeesha Silva", "0719876543", "nadeesha@example.com")
    svc.add_vehicle("CAR-01", "Toyota Aqua", VehicleCategory.HYBRID)
    svc.add_vehicle("CAR-02", "Nissan Leaf", VehicleCategory.ELECTRIC)
    svc.add_vehicle("CAR-03", "Suzuki Alto", VehicleCategory.COMPACT_PETROL)
    return svc
