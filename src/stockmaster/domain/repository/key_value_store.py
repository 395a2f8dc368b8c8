"""Abstract durable key-value store.

Defined in the domain layer so persistence logic never depends on a
concrete backend.  Implementations (JSON file, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value.

        Raises StorageWriteError if the backend rejects the write.
        """
