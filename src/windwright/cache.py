"""Compute-once memo cache keyed by raw strings."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class MemoCache(Generic[K, V]):
    """Insert-if-absent cache: the first lookup of a key computes and keeps it.

    Entries are never evicted.  ``None`` and empty results are stored like
    any other value.  Keys hash onto a fixed set of striped locks, so
    concurrent lookups of different keys rarely contend while one key is
    still only ever computed once; a value is published to the table only
    after it is fully computed.
    """

    def __init__(self, compute: Callable[[K], V], stripes: int = 16) -> None:
        self._compute = compute
        self._data: dict[K, V] = {}
        self._locks = [threading.Lock() for _ in range(max(1, stripes))]

    def get(self, key: K) -> V:
        value = self._data.get(key, _MISSING)
        if value is not _MISSING:
            return value  # type: ignore[return-value]
        with self._locks[hash(key) % len(self._locks)]:
            value = self._data.get(key, _MISSING)
            if value is _MISSING:
                value = self._compute(key)
                self._data[key] = value  # type: ignore[assignment]
            return value  # type: ignore[return-value]

    def values(self) -> list[V]:
        """Return a snapshot of the computed values, in insertion order."""
        return list(self._data.values())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoCache(size={len(self._data)})"
