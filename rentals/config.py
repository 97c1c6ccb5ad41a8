"""Booking policy configuration."""

from dataclasses import dataclass

from rentals.const import (
    BOOKING_ID_ATTEMPTS,
    BOOKING_ID_LENGTH,
    LEAD_TIME_DAYS,
    LONG_RENTAL_DAYS,
    LONG_RENTAL_DISCOUNT,
    REFUNDABLE_DEPOSIT,
)


@dataclass(frozen=True)
class BookingPolicy:
    """Tunable rules applied by the reservation ledger and invoice calculator."""

    lead_time_days: int = LEAD_TIME_DAYS
    refundable_deposit: int = REFUNDABLE_DEPOSIT
    long_rental_days: int = LONG_RENTAL_DAYS
    long_rental_discount: float = LONG_RENTAL_DISCOUNT
    booking_id_length: int = BOOKING_ID_LENGTH
    booking_id_attempts: int = BOOKING_ID_ATTEMPTS

    def __post_init__(self) -> None:
        if self.lead_time_days < 0:
            raise ValueError("Lead time cannot be negative")
        if self.refundable_deposit < 0:
            raise ValueError("Deposit cannot be negative")
        if self.long_rental_days < 1:
            raise ValueError("Long rental threshold must be at least one day")
        if not 0 <= self.long_rental_discount <= 1:
            raise ValueError("Discount must be between 0 and 1")
        if self.booking_id_length < 1:
            raise ValueError("Booking id length must be positive")
        if self.booking_id_attempts < 1:
            raise ValueError("At least one booking id attempt is required")
