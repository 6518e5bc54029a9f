from typing import Iterable, Tuple

from projspec.models.schemas import Projection

WEB_MERCATOR_DEFINITION = (
    "+proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 +lon_0=0.0 +x_0=0.0 +y_0=0 "
    "+k=1.0 +units=m +nadgrids=@null +no_defs"
)


def build_registry(entries: Iterable[Tuple[str, str]]) -> Tuple[Projection, ...]:
    """Build an ordered projection catalog from ``(name, definition)`` pairs.

    Names end up as ``Projections.<name>`` in the emitted spec, so they must be
    identifiers and unique within the catalog.
    """

    projections = []
    seen = set()
    for name, definition in entries:
        if not name.isidentifier():
            raise ValueError(f"Projection name must be an identifier: {name!r}")
        if name in seen:
            raise ValueError(f"Duplicate projection name: {name}")
        seen.add(name)
        projections.append(Projection(name=name, definition=definition))
    return tuple(projections)


PROJECTIONS: Tuple[Projection, ...] = build_registry(
    [
        ("WebMercator", WEB_MERCATOR_DEFINITION),
    ]
)


def list_projections() -> Tuple[Projection, ...]:
    return PROJECTIONS


def get_projection(name: str) -> Projection:
    for projection in PROJECTIONS:
        if projection.name == name:
            return projection
    raise KeyError(name)
