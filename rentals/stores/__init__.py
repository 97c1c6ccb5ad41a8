from rentals.stores.interfaces import CustomerStore, ReservationStore, Store, VehicleStore
from rentals.stores.memory_store import InMemoryStore

__all__ = [
    "Store",
    "VehicleStore",
    "CustomerStore",
    "ReservationStore",
    "InMemoryStore",
]
