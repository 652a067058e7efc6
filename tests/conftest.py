from __future__ import annotations

from collections.abc import Iterator

import pytest

from delve import config
from delve.util import rng
from delve.util.performance import perf_tracker


@pytest.fixture(autouse=True)
def seeded_rng() -> Iterator[None]:
    """Give every test the same global RNG streams."""
    rng.init(config.RANDOM_SEED)
    yield
    rng.init(config.RANDOM_SEED)


@pytest.fixture(autouse=True)
def quiet_performance_tracker() -> Iterator[None]:
    """Leave performance tracking off and empty after each test."""
    yield
    perf_tracker.disable()
    perf_tracker.reset()
