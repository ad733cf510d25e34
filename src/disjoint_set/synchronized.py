"""Thread-safe wrapper around DisjointSet."""

import threading
from collections.abc import Iterable, Iterator
from typing import Generic

from disjoint_set.models import RegistryStats
from disjoint_set.registry import DisjointSet, T


class SynchronizedDisjointSet(Generic[T]):
    """A DisjointSet guarded by a single lock.

    Every operation holds the lock for its whole duration. This includes the
    query methods, because find() rewrites parent links as it compresses paths.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._registry: DisjointSet[T] = DisjointSet(elements)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __contains__(self, element: object) -> bool:
        with self._lock:
            return element in self._registry

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            snapshot = list(self._registry)
        return iter(snapshot)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"{type(self).__name__}(elements={len(self._registry)}, "
                f"groups={self._registry.group_count})"
            )

    @property
    def group_count(self) -> int:
        """Number of disjoint groups currently in the registry."""
        with self._lock:
            return self._registry.group_count

    def insert(self, element: T) -> None:
        with self._lock:
            self._registry.insert(element)

    def find(self, element: T) -> T:
        with self._lock:
            return self._registry.find(element)

    def union(self, first: T, second: T) -> None:
        with self._lock:
            self._registry.union(first, second)

    def is_connected(self, first: T, second: T) -> bool:
        with self._lock:
            return self._registry.is_connected(first, second)

    def group_size(self, element: T) -> int:
        with self._lock:
            return self._registry.group_size(element)

    def members(self, element: T) -> set[T]:
        with self._lock:
            return self._registry.members(element)

    def groups(self) -> dict[T, set[T]]:
        with self._lock:
            return self._registry.groups()

    def stats(self) -> RegistryStats:
        with self._lock:
            return self._registry.stats()
