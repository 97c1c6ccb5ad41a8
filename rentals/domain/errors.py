"""Domain error codes for the rentals module."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    DUPLICATE_IDENTIFIER = "DUPLICATE_IDENTIFIER"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    VEHICLE_NOT_FOUND = "VEHICLE_NOT_FOUND"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
    VEHICLE_UNAVAILABLE = "VEHICLE_UNAVAILABLE"
    LEAD_TIME_VIOLATION = "LEAD_TIME_VIOLATION"
    VEHICLE_IN_USE = "VEHICLE_IN_USE"
    CANCELLATION_WINDOW_CLOSED = "CANCELLATION_WINDOW_CLOSED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class DuplicateIdentifierError(DomainError):
    """Raised when an identifier is already in use."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_IDENTIFIER,
            message=f"{entity} identifier already in use",
        )
        self.entity = entity
        self.entity_id = entity_id


class EntityNotFoundError(DomainError):
    """Raised when a customer, vehicle or reservation lookup fails."""

    def __init__(self, code: ErrorCode, entity: str, entity_id: str) -> None:
        super().__init__(code=code, message=f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class CustomerNotFoundError(EntityNotFoundError):
    def __init__(self, customer_id: str) -> None:
        super().__init__(ErrorCode.CUSTOMER_NOT_FOUND, "Customer", customer_id)


class VehicleNotFoundError(EntityNotFoundError):
    def __init__(self, vehicle_id: str) -> None:
        super().__init__(ErrorCode.VEHICLE_NOT_FOUND, "Vehicle", vehicle_id)


class ReservationNotFoundError(EntityNotFoundError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(ErrorCode.RESERVATION_NOT_FOUND, "Reservation", booking_id)


class VehicleUnavailableError(DomainError):
    """Raised when a reservation targets a vehicle that is not available."""

    def __init__(self, vehicle_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.VEHICLE_UNAVAILABLE,
            message="Vehicle not available",
        )
        self.vehicle_id = vehicle_id
        self.status = status


class LeadTimeViolationError(DomainError):
    """Raised when the rental starts too soon after the booking date."""

    def __init__(self, lead_time_days: int, gap_days: int) -> None:
        super().__init__(
            code=ErrorCode.LEAD_TIME_VIOLATION,
            message=f"Booking must be at least {lead_time_days} days before rental",
        )
        self.lead_time_days = lead_time_days
        self.gap_days = gap_days


class VehicleInUseError(DomainError):
    """Raised when a vehicle referenced by a reservation is removed or forced out of it."""

    def __init__(self, vehicle_id: str, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.VEHICLE_IN_USE,
            message="Vehicle is referenced by an active reservation",
        )
        self.vehicle_id = vehicle_id
        self.booking_id = booking_id


class CancellationWindowClosedError(DomainError):
    """Raised when cancelling on or after the rental start date."""

    def __init__(self, booking_id: str, rental_start: date) -> None:
        super().__init__(
            code=ErrorCode.CANCELLATION_WINDOW_CLOSED,
            message="Cannot cancel reservation on or after rental start date",
        )
        self.booking_id = booking_id
        self.rental_start = rental_start
