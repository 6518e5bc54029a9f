"""Utility helpers shared by the generator tests."""
import math
import re
from typing import Iterable, List, Optional, Tuple

import numpy as np

from projspec.services.engine import EngineContext, GeodesyEngine
from projspec.services.errors import ConfigurationError, TransformError

RADIUS = 6378137.0


class FakeEngine(GeodesyEngine):
    """Plate carree on a sphere, recording every call.

    Definitions containing ``+proj=latlong`` are geographic, ``+proj=bogus``
    fails to initialise, and ``max_lat`` (degrees) makes forward calls beyond
    that latitude fail the way an out-of-domain PROJ call would.
    """

    def __init__(self, max_lat: Optional[float] = None):
        self.max_lat = max_lat
        self.contexts: List[EngineContext] = []
        self.calls: List[Tuple[str, str, float, float]] = []

    def create_context(self, definition: str) -> EngineContext:
        if "+proj=bogus" in definition:
            raise ConfigurationError(definition, reason="unknown projection id")
        context = EngineContext(definition, is_geographic="+proj=latlong" in definition)
        self.contexts.append(context)
        return context

    def transform(self, source, target, x, y):
        assert not source.closed and not target.closed
        self.calls.append((source.definition, target.definition, x, y))
        if source.is_geographic and target.is_geographic:
            return x, y
        if source.is_geographic:
            if self.max_lat is not None and abs(y) > math.radians(self.max_lat):
                raise TransformError("latitude or longitude exceeded limits")
            return x * RADIUS, y * RADIUS
        return x / RADIUS, y / RADIUS


def almost_equal(actual: Iterable[float], expected: Iterable[float], tol: float) -> bool:
    """Return True if two numeric sequences are within tolerance of each other."""

    a = np.array(list(actual), dtype=float)
    b = np.array(list(expected), dtype=float)
    return np.allclose(a, b, atol=tol, rtol=0.0)


CALL_RE = re.compile(r"xy = Projections\.(\w+)\.(forward|inverse)\(\{x: (\S+), y: (\S+)\}\)")
EXPECT_RE = re.compile(r"xy\.([xy])\.should\.equal_approximately (\S+)")


def parse_assertions(text: str) -> List[Tuple[str, str, Tuple[str, str], Tuple[str, str]]]:
    """Pull ``(name, method, input literals, expected literals)`` out of spec text."""

    blocks = []
    current = None
    expected: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        call = CALL_RE.match(line)
        if call:
            current = (call.group(1), call.group(2), (call.group(3), call.group(4)))
            expected = []
            continue
        check = EXPECT_RE.match(line)
        if check and current is not None:
            expected.append(check.group(2))
            if len(expected) == 2:
                blocks.append((current[0], current[1], current[2], (expected[0], expected[1])))
                current = None
    return blocks
