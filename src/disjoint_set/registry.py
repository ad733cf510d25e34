"""Disjoint-set (union-find) registry with path compression and union by size."""

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from disjoint_set.errors import DuplicateElementError, ElementNotFoundError
from disjoint_set.logging import get_logger
from disjoint_set.models import RegistryStats

logger = get_logger(__name__)

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Groups a universe of hashable elements into disjoint sets.

    Each element is assigned a dense index on entry. Parent links and group
    sizes live in flat lists keyed by that index; an index is a root when it is
    its own parent. Sizes are only meaningful at roots.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        """Create a registry where every element starts in its own group.

        Args:
            elements: Elements of the universe. Duplicates are ignored.
        """
        self._index: dict[T, int] = {}
        self._elements: list[T] = []
        self._parent: list[int] = []
        self._size: list[int] = []
        self._group_count = 0

        for element in elements:
            if element not in self._index:
                self._append(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._index
        except TypeError:
            # Unhashable values can never be members
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(elements={len(self)}, groups={self._group_count})"

    @property
    def group_count(self) -> int:
        """Number of disjoint groups currently in the registry."""
        return self._group_count

    def _append(self, element: T) -> None:
        index = len(self._elements)
        self._index[element] = index
        self._elements.append(element)
        self._parent.append(index)
        self._size.append(1)
        self._group_count += 1

    def _lookup(self, element: object) -> int:
        """Return the index of element, raising ElementNotFoundError if absent."""
        try:
            return self._index[element]  # type: ignore[index]
        except (KeyError, TypeError):
            logger.debug("element_not_found", element=repr(element))
            raise ElementNotFoundError(element) from None

    def _root(self, index: int) -> int:
        """Return the root index for index, compressing the path walked."""
        parent = self._parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while index != root:
            next_index = parent[index]
            parent[index] = root
            index = next_index
        return root

    def insert(self, element: T) -> None:
        """Add element to the universe as a new singleton group.

        Raises:
            DuplicateElementError: If element is already present.
        """
        if element in self._index:
            logger.debug("duplicate_element", element=repr(element))
            raise DuplicateElementError(element)
        self._append(element)
        logger.debug("element_inserted", element=repr(element), elements=len(self._elements))

    def find(self, element: T) -> T:
        """Return the root element of the group containing element.

        Raises:
            ElementNotFoundError: If element is not in the registry.
        """
        return self._elements[self._root(self._lookup(element))]

    def union(self, first: T, second: T) -> None:
        """Merge the groups containing first and second.

        The root of the smaller group is attached under the root of the larger
        one. When both groups have the same size, the root of second's group is
        attached under the root of first's group. Merging two elements that
        already share a group does nothing.

        Raises:
            ElementNotFoundError: If either element is not in the registry.
                Nothing is modified in that case.
        """
        first_index = self._lookup(first)
        second_index = self._lookup(second)

        root_a = self._root(first_index)
        root_b = self._root(second_index)
        if root_a == root_b:
            return

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a

        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._group_count -= 1

    def is_connected(self, first: T, second: T) -> bool:
        """Return True if first and second are in the same group."""
        first_index = self._lookup(first)
        second_index = self._lookup(second)
        return self._root(first_index) == self._root(second_index)

    def group_size(self, element: T) -> int:
        """Return the number of elements in element's group."""
        return self._size[self._root(self._lookup(element))]

    def members(self, element: T) -> set[T]:
        """Return every element sharing a group with element (itself included)."""
        root = self._root(self._lookup(element))
        return {
            member
            for index, member in enumerate(self._elements)
            if self._root(index) == root
        }

    def groups(self) -> dict[T, set[T]]:
        """Return a mapping of each group's root element to its members."""
        result: dict[T, set[T]] = {}
        for index, member in enumerate(self._elements):
            root = self._elements[self._root(index)]
            result.setdefault(root, set()).add(member)
        return result

    def stats(self) -> RegistryStats:
        """Summarize the registry's current grouping."""
        largest = max(
            (size for index, size in enumerate(self._size) if self._parent[index] == index),
            default=0,
        )
        return RegistryStats(
            element_count=len(self._elements),
            group_count=self._group_count,
            largest_group_size=largest,
        )
