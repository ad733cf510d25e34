"""Build registries according to Settings."""

from collections.abc import Iterable

from disjoint_set.config import Settings
from disjoint_set.logging import get_logger
from disjoint_set.registry import DisjointSet, T
from disjoint_set.synchronized import SynchronizedDisjointSet

logger = get_logger(__name__)


def create_registry(
    elements: Iterable[T] = (),
    settings: Settings | None = None,
) -> DisjointSet[T] | SynchronizedDisjointSet[T]:
    """Create a registry over elements.

    Args:
        elements: Elements of the universe.
        settings: Settings to use. Loaded from the environment when omitted.

    Returns:
        A SynchronizedDisjointSet when settings.thread_safe is set, otherwise
        a plain DisjointSet.
    """
    if settings is None:
        settings = Settings()

    registry: DisjointSet[T] | SynchronizedDisjointSet[T]
    if settings.thread_safe:
        registry = SynchronizedDisjointSet(elements)
    else:
        registry = DisjointSet(elements)

    logger.debug(
        "registry_created",
        elements=len(registry),
        thread_safe=settings.thread_safe,
    )
    return registry
