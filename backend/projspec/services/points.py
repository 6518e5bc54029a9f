import math
from typing import Tuple

from projspec.models.schemas import GeoPoint

# Order matters: emitted cases follow this sequence.
REFERENCE_POINTS: Tuple[GeoPoint, ...] = (
    GeoPoint(lon=math.degrees(1.0), lat=math.degrees(1.0)),
    GeoPoint(lon=0.0, lat=0.0),
    GeoPoint(lon=0.0, lat=45.0),
    GeoPoint(lon=0.0, lat=85.0),
    GeoPoint(lon=0.0, lat=-85.0),
    GeoPoint(lon=180.0, lat=0.0),
    GeoPoint(lon=-180.0, lat=0.0),
    GeoPoint(lon=45.0, lat=45.0),
)


def list_points() -> Tuple[GeoPoint, ...]:
    return REFERENCE_POINTS
