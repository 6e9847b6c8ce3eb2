# pylint: disable=missing-module-docstring,missing-function-docstring,redefined-outer-name
from datetime import datetime, timezone

import pytest

from regenlens.analytics.random_source import FixedSequence
from regenlens.geo.coordinate import Coordinate


@pytest.fixture
def fixed_rng():
    """Factory returning a FixedSequence replaying the given values."""

    def _make(*values):
        return FixedSequence(values or (0.5,))

    return _make


@pytest.fixture
def frozen_now():
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def machakos():
    return Coordinate(-1.5177, 37.2634)


@pytest.fixture
def rajasthan():
    return Coordinate(27.0238, 74.2179)
