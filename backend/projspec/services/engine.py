"""Geodesy engine port and its pyproj adapter.

The driver only talks to :class:`GeodesyEngine`. Angular coordinates cross this
boundary in radians on whichever side of a transform is geographic; linear
coordinates are in the projection's native units.
"""
import logging
import math
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from pyproj import CRS, Transformer, datadir
from pyproj.exceptions import CRSError, ProjError

from projspec.services.errors import ConfigurationError, TransformError

logger = logging.getLogger(__name__)


class EngineContext:
    """A transform handle for one definition string."""

    def __init__(self, definition: str, is_geographic: bool):
        self.definition = definition
        self.is_geographic = is_geographic
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "EngineContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class GeodesyEngine(ABC):
    @abstractmethod
    def create_context(self, definition: str) -> EngineContext:
        """Build a context or raise ConfigurationError."""
        ...

    @abstractmethod
    def transform(
        self, source: EngineContext, target: EngineContext, x: float, y: float
    ) -> Tuple[float, float]:
        """Move one coordinate pair from ``source`` to ``target`` or raise TransformError."""
        ...


class PyprojContext(EngineContext):
    def __init__(self, definition: str, crs: CRS):
        super().__init__(definition, is_geographic=crs.is_geographic)
        self.crs = crs
        # keyed by target definition
        self.transformer_cache: Dict[str, Transformer] = {}

    def close(self) -> None:
        self.transformer_cache.clear()
        super().close()


class PyprojEngine(GeodesyEngine):
    def __init__(self, proj_data_dir: Optional[str] = None):
        if proj_data_dir and proj_data_dir not in datadir.get_data_dir().split(os.pathsep):
            datadir.append_data_dir(proj_data_dir)

    @staticmethod
    def _values_finite(*values: float) -> bool:
        return all(math.isfinite(value) for value in values)

    def create_context(self, definition: str) -> PyprojContext:
        try:
            crs = CRS.from_user_input(definition)
        except CRSError as exc:
            raise ConfigurationError(definition, reason=str(exc)) from exc
        logger.debug("created context %r (geographic=%s)", definition, crs.is_geographic)
        return PyprojContext(definition, crs)

    def _transformer(self, source: PyprojContext, target: PyprojContext) -> Transformer:
        cached = source.transformer_cache.get(target.definition)
        if cached is not None:
            return cached
        try:
            transformer = Transformer.from_crs(source.crs, target.crs, always_xy=True)
        except (CRSError, ProjError) as exc:
            raise TransformError(f"no operation from {source.definition} to {target.definition}: {exc}") from exc
        source.transformer_cache[target.definition] = transformer
        return transformer

    def transform(
        self, source: EngineContext, target: EngineContext, x: float, y: float
    ) -> Tuple[float, float]:
        if not isinstance(source, PyprojContext) or not isinstance(target, PyprojContext):
            raise TypeError("PyprojEngine only accepts contexts it created")
        if source.closed or target.closed:
            raise ValueError("Cannot transform with a released context")

        transformer = self._transformer(source, target)
        try:
            x_out, y_out = transformer.transform(x, y, radians=True, errcheck=True)
        except ProjError as exc:
            raise TransformError(str(exc)) from exc
        if not self._values_finite(x_out, y_out):
            raise TransformError("Transformer produced non-finite output")
        return float(x_out), float(y_out)
