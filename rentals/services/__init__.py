from rentals.services.booking_service import BookingService
from rentals.services.customers import CustomerRegistry
from rentals.services.fleet import FleetRegistry
from rentals.services.invoice_log import InvoiceLog
from rentals.services.ledger import ReservationLedger

__all__ = [
    "BookingService",
    "CustomerRegistry",
    "FleetRegistry",
    "InvoiceLog",
    "ReservationLedger",
]
