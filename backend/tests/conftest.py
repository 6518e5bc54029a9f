"""Pytest fixtures for the spec generator tests."""
from typing import Tuple

import pytest

from helpers import FakeEngine
from projspec.models.schemas import GeoPoint, Projection


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Engine double used wherever real PROJ output is not the point."""
    return FakeEngine()


@pytest.fixture
def plate_carree() -> Projection:
    return Projection(name="PlateCarree", definition="+proj=eqc +R=6378137")


@pytest.fixture
def sample_points() -> Tuple[GeoPoint, ...]:
    return (
        GeoPoint(lon=0.0, lat=0.0),
        GeoPoint(lon=10.0, lat=20.0),
        GeoPoint(lon=-180.0, lat=-85.0),
    )
