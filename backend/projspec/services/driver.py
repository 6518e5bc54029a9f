import logging
import math
from contextlib import ExitStack
from typing import Iterable, List, Sequence, Tuple

from projspec.config import DEFAULT_GEOGRAPHIC_DEFINITION
from projspec.models.schemas import GeoPoint, ProjectedPoint, Projection, ProjectionSuite, TestCase
from projspec.services.engine import EngineContext, GeodesyEngine
from projspec.services.errors import ConfigurationError, TransformError

logger = logging.getLogger(__name__)


def to_engine_units(context: EngineContext, a: float, b: float) -> Tuple[float, float]:
    if context.is_geographic:
        return math.radians(a), math.radians(b)
    return a, b


def from_engine_units(context: EngineContext, a: float, b: float) -> Tuple[float, float]:
    if context.is_geographic:
        return math.degrees(a), math.degrees(b)
    return a, b


class TransformDriver:
    """Runs the forward/inverse round trip for every reference point.

    Results are passed through exactly as the engine returns them; no rounding
    and no comparison of the inverse result against the input.
    """

    def __init__(self, engine: GeodesyEngine, geographic_definition: str = DEFAULT_GEOGRAPHIC_DEFINITION):
        self.engine = engine
        self.geographic_definition = geographic_definition

    def _open_geographic(self) -> EngineContext:
        try:
            return self.engine.create_context(self.geographic_definition)
        except ConfigurationError as exc:
            raise ConfigurationError(
                self.geographic_definition, reason=exc.reason, role="source"
            ) from exc

    def _open_target(self, projection: Projection) -> EngineContext:
        try:
            return self.engine.create_context(projection.definition)
        except ConfigurationError as exc:
            raise ConfigurationError(
                projection.definition,
                reason=exc.reason,
                role="target",
                projection=projection.name,
            ) from exc

    def _transform(
        self,
        projection: Projection,
        direction: str,
        source: EngineContext,
        target: EngineContext,
        a: float,
        b: float,
    ) -> Tuple[float, float]:
        a_in, b_in = to_engine_units(source, a, b)
        try:
            a_out, b_out = self.engine.transform(source, target, a_in, b_in)
        except TransformError as exc:
            raise TransformError(
                exc.reason, projection=projection.name, direction=direction, x=a, y=b
            ) from exc
        return from_engine_units(target, a_out, b_out)

    def generate(self, projection: Projection, points: Iterable[GeoPoint]) -> List[TestCase]:
        with ExitStack() as stack:
            geographic = stack.enter_context(self._open_geographic())
            target = stack.enter_context(self._open_target(projection))

            cases: List[TestCase] = []
            for point in points:
                x, y = self._transform(projection, "forward", geographic, target, point.lon, point.lat)
                forward_output = ProjectedPoint(x=x, y=y)

                lon, lat = self._transform(
                    projection, "inverse", target, geographic, forward_output.x, forward_output.y
                )
                inverse_output = GeoPoint(lon=lon, lat=lat)

                logger.debug(
                    "%s: (%r, %r) -> (%r, %r) -> (%r, %r)",
                    projection.name, point.lon, point.lat, x, y, lon, lat,
                )
                cases.append(
                    TestCase(
                        projection=projection,
                        input=point,
                        forward_output=forward_output,
                        inverse_output=inverse_output,
                    )
                )
        return cases

    def generate_all(
        self, projections: Iterable[Projection], points: Sequence[GeoPoint]
    ) -> List[ProjectionSuite]:
        suites: List[ProjectionSuite] = []
        for projection in projections:
            suites.append(ProjectionSuite(projection=projection, cases=self.generate(projection, points)))
        return suites
