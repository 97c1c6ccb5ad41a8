"""Reservation ledger.

The ledger is the only component that moves a vehicle between AVAILABLE and
RESERVED. A reservation exists exactly as long as its vehicle is held, so every
path that removes a reservation also releases the vehicle.
"""

import logging
from collections.abc import Callable
from datetime import date

from rentals.config import BookingPolicy
from rentals.domain import (
    Invoice,
    PricingCatalog,
    Reservation,
    VehicleStatus,
    calculate_invoice,
)
from rentals.domain.errors import (
    CancellationWindowClosedError,
    CustomerNotFoundError,
    DuplicateIdentifierError,
    LeadTimeViolationError,
    ReservationNotFoundError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from rentals.domain.value_objects import new_booking_id, normalize_booking_id
from rentals.services.customers import CustomerRegistry
from rentals.services.fleet import FleetRegistry
from rentals.services.invoice_log import InvoiceLog
from rentals.stores.interfaces import ReservationStore

_LOGGER = logging.getLogger(__name__)


class ReservationLedger:
    """Owns active reservations keyed by booking id."""

    def __init__(
        self,
        store: ReservationStore,
        customers: CustomerRegistry,
        fleet: FleetRegistry,
        catalog: PricingCatalog,
        policy: BookingPolicy,
        *,
        invoice_log: InvoiceLog | None = None,
        id_factory: Callable[[int], str] = new_booking_id,
    ) -> None:
        self._store = store
        self._customers = customers
        self._fleet = fleet
        self._catalog = catalog
        self._policy = policy
        self._invoice_log = invoice_log
        self._id_factory = id_factory

    def make_reservation(
        self,
        customer_id: str,
        vehicle_id: str,
        today: date,
        rental_start: date,
        days: int,
        expected_km: int,
    ) -> Reservation:
        """Book an available vehicle for a registered customer.

        Checks run in order and the first failure wins.

        Raises:
            CustomerNotFoundError: If the customer is not registered.
            VehicleNotFoundError: If the vehicle is not in the fleet.
            VehicleUnavailableError: If the vehicle is not AVAILABLE.
            LeadTimeViolationError: If rental_start is fewer than the lead time
                days after today.
            DuplicateIdentifierError: If no unused booking id could be generated.
        """
        _LOGGER.debug("Reservation of %s for %s started", vehicle_id, customer_id)
        customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        vehicle = self._fleet.get(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        if not vehicle.is_available:
            _LOGGER.warning("Vehicle %s is %s", vehicle_id, vehicle.status.value)
            raise VehicleUnavailableError(vehicle_id, vehicle.status.value)
        gap_days = (rental_start - today).days
        if gap_days < self._policy.lead_time_days:
            _LOGGER.warning(
                "Rental start %s is %d days after %s", rental_start, gap_days, today
            )
            raise LeadTimeViolationError(self._policy.lead_time_days, gap_days)

        reservation = Reservation(
            booking_id=self._unused_booking_id(),
            customer=customer,
            vehicle=vehicle,
            booking_date=today,
            rental_start=rental_start,
            days=days,
            expected_km=expected_km,
            deposit_taken=True,
        )
        self._store.put(reservation.booking_id, reservation)
        self._fleet.set_status(vehicle, VehicleStatus.RESERVED)
        _LOGGER.info(
            "Reservation %s made: vehicle %s for %s from %s",
            reservation.booking_id,
            vehicle_id,
            customer_id,
            rental_start,
        )
        return reservation

    def search(self, query: str) -> list[Reservation]:
        """Match query case-insensitively against booking id or customer name."""
        needle = query.lower()
        return [
            reservation
            for reservation in self._store.list_all()
            if needle in reservation.booking_id.lower()
            or needle in reservation.customer.name.lower()
        ]

    def bookings_on_date(self, day: date) -> list[Reservation]:
        return [r for r in self._store.list_all() if r.rental_start == day]

    def get(self, booking_id: str) -> Reservation | None:
        return self._store.get(normalize_booking_id(booking_id))

    def finalize_invoice(self, booking_id: str, actual_km: int) -> Invoice:
        """Price the rental, release the vehicle and close the reservation.

        Raises:
            ReservationNotFoundError: If no active reservation has this id.
        """
        _LOGGER.debug("Finalize of %s started", booking_id)
        reservation = self.get(booking_id)
        if reservation is None:
            raise ReservationNotFoundError(booking_id)

        invoice = calculate_invoice(reservation, actual_km, self._catalog, self._policy)
        self._release(reservation)
        if self._invoice_log is not None:
            self._invoice_log.record(invoice)
        _LOGGER.info(
            "Reservation %s finalized: payable %.2f", reservation.booking_id, invoice.final_payable
        )
        return invoice

    def cancel_reservation(self, booking_id: str, today: date) -> bool:
        """Cancel before the rental starts. Return False if the id is unknown.

        Raises:
            CancellationWindowClosedError: If today is on or after rental_start.
        """
        reservation = self.get(booking_id)
        if reservation is None:
            _LOGGER.debug("Cancel of unknown reservation %s", booking_id)
            return False
        if not today < reservation.rental_start:
            _LOGGER.warning(
                "Cancel of %s rejected: rental started %s",
                reservation.booking_id,
                reservation.rental_start,
            )
            raise CancellationWindowClosedError(reservation.booking_id, reservation.rental_start)

        self._release(reservation)
        _LOGGER.info("Reservation %s cancelled", reservation.booking_id)
        return True

    def _release(self, reservation: Reservation) -> None:
        self._fleet.set_status(reservation.vehicle, VehicleStatus.AVAILABLE)
        self._store.delete(reservation.booking_id)

    def _unused_booking_id(self) -> str:
        for _ in range(self._policy.booking_id_attempts):
            booking_id = normalize_booking_id(self._id_factory(self._policy.booking_id_length))
            if not self._store.exists(booking_id):
                return booking_id
            _LOGGER.debug("Booking id %s collided", booking_id)
        raise DuplicateIdentifierError("Reservation", booking_id)

    def list(self) -> list[Reservation]:
        return self._store.list_all()
