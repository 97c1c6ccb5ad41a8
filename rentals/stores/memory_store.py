"""In-memory implementation of the Store interface."""

from typing import TypeVar

from rentals.stores.interfaces import Store

T = TypeVar("T")


class InMemoryStore(Store[T]):
    """Dict-backed store living for the lifetime of the process."""

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def get(self, key: str) -> T | None:
        return self._items.get(key)

    def put(self, key: str, value: T) -> None:
        self._items[key] = value

    def delete(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def list_all(self) -> list[T]:
        return list(self._items.values())

    def exists(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
