import logging
from typing import List, Optional, Sequence

from projspec.config import Settings
from projspec.models.schemas import GeoPoint, Projection, ProjectionSuite
from projspec.services.driver import TransformDriver
from projspec.services.emitter import SpecEmitter, render_json
from projspec.services.engine import GeodesyEngine, PyprojEngine
from projspec.services.points import list_points
from projspec.services.registry import build_registry, list_projections

logger = logging.getLogger(__name__)


class SpecGenerationService:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[GeodesyEngine] = None,
        projections: Optional[Sequence[Projection]] = None,
        points: Optional[Sequence[GeoPoint]] = None,
    ):
        self.settings = settings or Settings()
        self.engine = engine or PyprojEngine(proj_data_dir=self.settings.proj_data_dir)
        if projections is not None:
            self.projections = build_registry((p.name, p.definition) for p in projections)
        else:
            self.projections = list_projections()
        self.points = tuple(points) if points is not None else list_points()
        self.driver = TransformDriver(self.engine, self.settings.geographic_definition)
        self.emitter = SpecEmitter(binding=self.settings.binding, indent=self.settings.indent)

    def build_suites(self) -> List[ProjectionSuite]:
        logger.debug(
            "generating %d projection(s) x %d point(s)", len(self.projections), len(self.points)
        )
        return self.driver.generate_all(self.projections, self.points)

    def render_text(self) -> str:
        return self.emitter.render(self.build_suites())

    def render_json(self) -> str:
        return render_json(self.build_suites())
