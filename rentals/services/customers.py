"""Customer registry."""

import logging

from rentals.domain import Customer
from rentals.stores.interfaces import CustomerStore

_LOGGER = logging.getLogger(__name__)


class CustomerRegistry:
    """Owns customer records keyed by customer id. Customers are never updated or removed."""

    def __init__(self, store: CustomerStore) -> None:
        self._store = store

    def register(self, customer_id: str, name: str, contact: str, email: str) -> bool:
        """Register a customer. Return False if the id is taken."""
        if self._store.exists(customer_id):
            _LOGGER.debug("Customer %s already registered", customer_id)
            return False
        self._store.put(
            customer_id,
            Customer(id=customer_id, name=name, contact=contact, email=email),
        )
        _LOGGER.info("Customer %s registered", customer_id)
        return True

    def get(self, customer_id: str) -> Customer | None:
        return self._store.get(customer_id)

    def list(self) -> list[Customer]:
        return self._store.list_all()
