"""Disjoint-set (union-find) registries."""

from disjoint_set.config import Settings
from disjoint_set.errors import DisjointSetError, DuplicateElementError, ElementNotFoundError
from disjoint_set.factory import create_registry
from disjoint_set.logging import configure_logging, get_logger
from disjoint_set.models import RegistryStats
from disjoint_set.registry import DisjointSet
from disjoint_set.synchronized import SynchronizedDisjointSet

__all__ = [
    "DisjointSet",
    "DisjointSetError",
    "DuplicateElementError",
    "ElementNotFoundError",
    "RegistryStats",
    "Settings",
    "SynchronizedDisjointSet",
    "configure_logging",
    "create_registry",
    "get_logger",
]
