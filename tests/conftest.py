"""Shared pytest fixtures."""

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings

from disjoint_set.config import Settings
from disjoint_set.logging import HANDLER_NAME, LOGGER_NAME
from disjoint_set.registry import DisjointSet

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture(autouse=True)
def _reset_library_logging() -> Iterator[None]:
    """Undo any handler or level a test installed on the library logger."""
    yield
    library_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(library_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


@pytest.fixture
def example_registry() -> DisjointSet[int]:
    """Registry after the reference merge sequence: {1,2,3,5} {6,9}."""
    registry = DisjointSet([1, 2, 3, 5, 6, 9])
    registry.union(1, 2)
    registry.union(3, 5)
    registry.union(6, 9)
    registry.union(1, 3)
    return registry
