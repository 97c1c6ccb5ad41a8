"""Default booking rules."""

LEAD_TIME_DAYS = 3

REFUNDABLE_DEPOSIT = 5000

LONG_RENTAL_DAYS = 7
LONG_RENTAL_DISCOUNT = 0.10

BOOKING_ID_LENGTH = 8
BOOKING_ID_ATTEMPTS = 5
