"""Exceptions raised by disjoint-set registries."""

from collections.abc import Hashable


class DisjointSetError(Exception):
    """Base class for all disjoint-set errors."""


class ElementNotFoundError(DisjointSetError, LookupError):
    """Raised when an element is not part of the registry's universe."""

    # Typed as object: lookups of unhashable values also raise this error.
    def __init__(self, element: object) -> None:
        self.element = element
        super().__init__(f"Element {element!r} is not in the disjoint set")


class DuplicateElementError(DisjointSetError, ValueError):
    """Raised when inserting an element that is already present."""

    def __init__(self, element: Hashable) -> None:
        self.element = element
        super().__init__(f"Element {element!r} is already in the disjoint set")
