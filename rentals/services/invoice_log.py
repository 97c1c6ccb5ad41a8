"""Append-only history of finalized invoices."""

from rentals.domain import Invoice


class InvoiceLog:
    """Append-only record of finalized invoices."""

    def __init__(self) -> None:
        self._entries: list[Invoice] = []

    def record(self, invoice: Invoice) -> None:
        self._entries.append(invoice)

    def entries(self) -> tuple[Invoice, ...]:
        return tuple(self._entries)

    def for_booking(self, booking_id: str) -> Invoice | None:
        for invoice in self._entries:
            if invoice.booking_id == booking_id:
                return invoice
        return None

    def __len__(self) -> int:
        return len(self._entries)
