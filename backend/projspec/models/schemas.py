from pydantic import BaseModel, ConfigDict
from typing import List


class Projection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    definition: str


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lon: float
    lat: float


class ProjectedPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class TestCase(BaseModel):
    """One reference point pushed forward and back through a projection."""

    model_config = ConfigDict(frozen=True)
    __test__ = False  # keep pytest from collecting the model

    projection: Projection
    input: GeoPoint
    forward_output: ProjectedPoint
    inverse_output: GeoPoint


class ProjectionSuite(BaseModel):
    model_config = ConfigDict(frozen=True)

    projection: Projection
    cases: List[TestCase]
