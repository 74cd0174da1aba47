"""Root conftest for all tests.

Shared catalog fixtures for the workout planning tests.
"""

import pytest

from axle.workouts.library.catalog import MovementCatalog, load_default_catalog
from axle.workouts.library.movement import Movement


@pytest.fixture(scope="session")
def catalog() -> MovementCatalog:
    """Built-in movement catalog (immutable, safe to share across tests)."""
    return load_default_catalog()


@pytest.fixture
def small_catalog() -> MovementCatalog:
    """Tiny substitute catalog with one movement per role."""
    return MovementCatalog(
        [
            Movement.of("sled-push", "Sled Push", ["sled"], ["full", "conditioning"]),
            Movement.of("squat", "Squat", ["bodyweight"], ["squat", "lower"]),
            Movement.of("pushup", "Push-up", ["bodyweight"], ["push", "upper", "core"]),
            Movement.of("stretch", "Stretch", ["bodyweight"], ["mobility", "warmup"]),
        ]
    )


@pytest.fixture
def captured_logs():
    """Collect loguru records emitted during a test."""
    from loguru import logger

    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
