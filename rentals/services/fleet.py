"""Fleet registry."""

import logging

from rentals.domain import Reservation, Vehicle, VehicleCategory, VehicleStatus
from rentals.domain.errors import VehicleInUseError
from rentals.stores.interfaces import ReservationStore, VehicleStore

_LOGGER = logging.getLogger(__name__)


class FleetRegistry:
    """Owns vehicle records keyed by vehicle id."""

    def __init__(self, store: VehicleStore, reservations: ReservationStore) -> None:
        self._store = store
        self._reservations = reservations

    def add(self, vehicle_id: str, model: str, category: VehicleCategory) -> bool:
        """Add an available vehicle. Return False if the id is taken."""
        if self._store.exists(vehicle_id):
            _LOGGER.debug("Vehicle %s already registered", vehicle_id)
            return False
        self._store.put(vehicle_id, Vehicle(id=vehicle_id, model=model, category=category))
        _LOGGER.info("Vehicle %s added (%s)", vehicle_id, category.value)
        return True

    def update(
        self,
        vehicle_id: str,
        model: str,
        category: VehicleCategory,
        status: VehicleStatus,
    ) -> bool:
        """Overwrite model, category and status. Return False if the id is unknown.

        Raises:
            VehicleInUseError: If an active reservation holds the vehicle and the
                new status is not RESERVED.
        """
        vehicle = self._store.get(vehicle_id)
        if vehicle is None:
            return False
        if status is not VehicleStatus.RESERVED:
            reservation = self._active_reservation(vehicle_id)
            if reservation is not None:
                _LOGGER.warning(
                    "Vehicle %s status change to %s rejected: held by %s",
                    vehicle_id,
                    status.value,
                    reservation.booking_id,
                )
                raise VehicleInUseError(vehicle_id, reservation.booking_id)
        vehicle.model = model
        vehicle.category = category
        vehicle.status = status
        self._store.put(vehicle_id, vehicle)
        _LOGGER.info("Vehicle %s updated (%s, %s)", vehicle_id, category.value, status.value)
        return True

    def remove(self, vehicle_id: str) -> bool:
        """Delete a vehicle. Return False if the id is unknown.

        Raises:
            VehicleInUseError: If an active reservation references the vehicle.
        """
        if not self._store.exists(vehicle_id):
            return False
        reservation = self._active_reservation(vehicle_id)
        if reservation is not None:
            _LOGGER.warning(
                "Vehicle %s removal rejected: held by %s", vehicle_id, reservation.booking_id
            )
            raise VehicleInUseError(vehicle_id, reservation.booking_id)
        self._store.delete(vehicle_id)
        _LOGGER.info("Vehicle %s removed", vehicle_id)
        return True

    def get(self, vehicle_id: str) -> Vehicle | None:
        return self._store.get(vehicle_id)

    def list(self) -> list[Vehicle]:
        return self._store.list_all()

    def set_status(self, vehicle: Vehicle, status: VehicleStatus) -> None:
        vehicle.status = status
        self._store.put(vehicle.id, vehicle)

    def _active_reservation(self, vehicle_id: str) -> Reservation | None:
        for reservation in self._reservations.list_all():
            if reservation.vehicle.id == vehicle_id:
                return reservation
        return None
