"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rentals.domain import Customer, Reservation, Vehicle

T = TypeVar("T")


class Store(ABC, Generic[T]):
    """Interface for keyed persistence of one entity type."""

    @abstractmethod
    def get(self, key: str) -> T | None:
        """Return the entity stored under key, or None if not found."""
        ...

    @abstractmethod
    def put(self, key: str, value: T) -> None:
        """Insert or replace the entity stored under key."""
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove the entity stored under key. Return False if it was absent."""
        ...

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return all entities in insertion order."""
        ...

    def exists(self, key: str) -> bool:
        return self.get(key) is not None


VehicleStore = Store[Vehicle]
CustomerStore = Store[Customer]
ReservationStore = Store[Reservation]
