"""Booking service - the single entry point for callers.

Services:
- Depend only on interfaces (stores)
- Own the registries and the ledger for the lifetime of the instance
- Propagate domain errors unchanged
- Return domain models or domain errors
"""

from datetime import date

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
from rentals.services.customers import CustomerRegistry
from rentals.services.fleet import FleetRegistry
from rentals.services.invoice_log import InvoiceLog
from rentals.services.ledger import ReservationLedger
from rentals.stores.interfaces import CustomerStore, ReservationStore, VehicleStore
from rentals.stores.memory_store import InMemoryStore


class BookingService:
    """Façade over the fleet, customer registry and reservation ledger."""

    def __init__(
        self,
        *,
        catalog: PricingCatalog | None = None,
        policy: BookingPolicy | None = None,
        vehicle_store: VehicleStore | None = None,
        customer_store: CustomerStore | None = None,
        reservation_store: ReservationStore | None = None,
        keep_invoice_history: bool = False,
    ) -> None:
        self._catalog = catalog or PricingCatalog()
        self._policy = policy or BookingPolicy()
        reservations = reservation_store if reservation_store is not None else InMemoryStore()
        self._invoice_log = InvoiceLog() if keep_invoice_history else None

        self._customers = CustomerRegistry(
            customer_store if customer_store is not None else InMemoryStore()
        )
        self._fleet = FleetRegistry(
            vehicle_store if vehicle_store is not None else InMemoryStore(),
            reservations,
        )
        self._ledger = ReservationLedger(
            reservations,
            self._customers,
            self._fleet,
            self._catalog,
            self._policy,
            invoice_log=self._invoice_log,
        )

    @property
    def catalog(self) -> PricingCatalog:
        return self._catalog

    @property
    def policy(self) -> BookingPolicy:
        return self._policy

    # Customers

    def register_customer(self, customer_id: str, name: str, contact: str, email: str) -> bool:
        return self._customers.register(customer_id, name, contact, email)

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def list_customers(self) -> list[Customer]:
        return self._customers.list()

    # Fleet

    def add_vehicle(self, vehicle_id: str, model: str, category: VehicleCategory) -> bool:
        return self._fleet.add(vehicle_id, model, category)

    def update_vehicle(
        self,
        vehicle_id: str,
        model: str,
        category: VehicleCategory,
        status: VehicleStatus,
    ) -> bool:
        """Overwrite a vehicle's details.

        Raises:
            VehicleInUseError: If the vehicle is reserved and status is not RESERVED.
        """
        return self._fleet.update(vehicle_id, model, category, status)

    def remove_vehicle(self, vehicle_id: str) -> bool:
        """Remove a vehicle.

        Raises:
            VehicleInUseError: If an active reservation references the vehicle.
        """
        return self._fleet.remove(vehicle_id)

    def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        return self._fleet.get(vehicle_id)

    def list_vehicles(self) -> list[Vehicle]:
        return self._fleet.list()

    # Reservations

    def make_reservation(
        self,
        customer_id: str,
        vehicle_id: str,
        today: date,
        rental_start: date,
        days: int,
        expected_km: int,
    ) -> Reservation:
        """Reserve a vehicle. See ReservationLedger.make_reservation for failures."""
        return self._ledger.make_reservation(
            customer_id, vehicle_id, today, rental_start, days, expected_km
        )

    def search_reservations(self, query: str) -> list[Reservation]:
        return self._ledger.search(query)

    def bookings_on_date(self, day: date) -> list[Reservation]:
        return self._ledger.bookings_on_date(day)

    def get_reservation(self, booking_id: str) -> Reservation | None:
        return self._ledger.get(booking_id)

    def list_reservations(self) -> list[Reservation]:
        return self._ledger.list()

    def finalize_invoice(self, booking_id: str, actual_km: int) -> Invoice:
        """Close a reservation and return its invoice.

        Raises:
            ReservationNotFoundError: If the booking id is unknown.
        """
        return self._ledger.finalize_invoice(booking_id, actual_km)

    def cancel_reservation(self, booking_id: str, today: date) -> bool:
        """Cancel a reservation. Return False if the booking id is unknown.

        Raises:
            CancellationWindowClosedError: If today is on or after the rental start.
        """
        return self._ledger.cancel_reservation(booking_id, today)

    # Invoices

    def invoice_history(self) -> tuple[Invoice, ...]:
        if self._invoice_log is None:
            return ()
        return self._invoice_log.entries()
