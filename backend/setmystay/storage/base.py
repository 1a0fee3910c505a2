from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String key-value capability standing in for browser local storage."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...
