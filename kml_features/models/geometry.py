"""Geometry value types produced by the converter.

The set of kinds is closed: ``Geometry`` is a union of six frozen
dataclasses, one per GeoJSON geometry type the converter emits.  Code
that needs to branch on the kind checks ``geometry.kind`` explicitly
rather than relying on a shared base class.

Coordinates are ``(lon, lat)`` with an optional altitude.  Altitude is
carried through to the output but is never used for measurement or
ring-closure comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

Position = list[float]


class GeometryKind(str, Enum):
    """Geometry kinds, valued by their GeoJSON type names."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"


LINE_KINDS = frozenset({GeometryKind.LINE_STRING, GeometryKind.MULTI_LINE_STRING})


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A single ``(lon, lat[, alt])`` position in WGS 84 degrees."""

    lon: float
    lat: float
    alt: float | None = None

    def same_position(self, other: Coordinate) -> bool:
        """Whether both coordinates share lon/lat (altitude is ignored)."""
        return self.lon == other.lon and self.lat == other.lat

    def to_position(self) -> Position:
        """Return ``[lon, lat]`` or ``[lon, lat, alt]`` when altitude is known."""
        if self.alt is None:
            return [self.lon, self.lat]
        return [self.lon, self.lat, self.alt]

    @classmethod
    def from_position(cls, position: list[float] | tuple[float, ...]) -> Coordinate:
        """Build a coordinate from a GeoJSON position array.

        Raises:
            ValueError: If the position has fewer than two elements.
        """
        if len(position) < 2:
            msg = f"Position needs at least lon, lat; got {list(position)!r}"
            raise ValueError(msg)
        alt = float(position[2]) if len(position) > 2 else None
        return cls(float(position[0]), float(position[1]), alt)


Ring = tuple[Coordinate, ...]


def close_ring(coords: list[Coordinate] | tuple[Coordinate, ...]) -> Ring:
    """Return the ring closed on lon/lat, appending the first vertex if needed.

    A ring that is already closed is returned unchanged.
    """
    ring = tuple(coords)
    if ring and not ring[0].same_position(ring[-1]):
        ring = (*ring, ring[0])
    return ring


# ---------------------------------------------------------------------------
# Geometry variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    coordinate: Coordinate

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    def to_geojson(self) -> dict[str, object]:
        return {"type": self.kind.value, "coordinates": self.coordinate.to_position()}


@dataclass(frozen=True, slots=True)
class LineString:
    coordinates: tuple[Coordinate, ...]

    kind: ClassVar[GeometryKind] = GeometryKind.LINE_STRING

    def to_geojson(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "coordinates": [c.to_position() for c in self.coordinates],
        }


@dataclass(frozen=True, slots=True)
class Polygon:
    """Polygon with its outer ring only; holes are not modelled."""

    rings: tuple[Ring, ...]

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "rings", tuple(close_ring(r) for r in self.rings))

    def to_geojson(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "coordinates": [[c.to_position() for c in ring] for ring in self.rings],
        }


@dataclass(frozen=True, slots=True)
class MultiPoint:
    coordinates: tuple[Coordinate, ...]

    kind: ClassVar[GeometryKind] = GeometryKind.MULTI_POINT

    def to_geojson(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "coordinates": [c.to_position() for c in self.coordinates],
        }


@dataclass(frozen=True, slots=True)
class MultiLineString:
    lines: tuple[tuple[Coordinate, ...], ...]

    kind: ClassVar[GeometryKind] = GeometryKind.MULTI_LINE_STRING

    def to_geojson(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "coordinates": [[c.to_position() for c in line] for line in self.lines],
        }


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    polygons: tuple[tuple[Ring, ...], ...]

    kind: ClassVar[GeometryKind] = GeometryKind.MULTI_POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "polygons",
            tuple(tuple(close_ring(r) for r in rings) for rings in self.polygons),
        )

    def to_geojson(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "coordinates": [
                [[c.to_position() for c in ring] for ring in rings] for rings in self.polygons
            ],
        }


Geometry = Point | LineString | Polygon | MultiPoint | MultiLineString | MultiPolygon


def geometry_from_geojson(data: dict[str, object]) -> Geometry:
    """Rebuild a geometry value from a GeoJSON geometry dict.

    Raises:
        ValueError: If ``type`` is not one of the supported kinds.
        TypeError: If ``coordinates`` is not a list.
    """
    raw = data.get("coordinates", [])
    if not isinstance(raw, list):
        msg = f"coordinates must be a list, got {type(raw).__name__}"
        raise TypeError(msg)

    kind = GeometryKind(data.get("type"))
    pos = Coordinate.from_position

    if kind is GeometryKind.POINT:
        return Point(pos(raw))
    if kind is GeometryKind.LINE_STRING:
        return LineString(tuple(pos(c) for c in raw))
    if kind is GeometryKind.POLYGON:
        return Polygon(tuple(tuple(pos(c) for c in ring) for ring in raw))
    if kind is GeometryKind.MULTI_POINT:
        return MultiPoint(tuple(pos(c) for c in raw))
    if kind is GeometryKind.MULTI_LINE_STRING:
        return MultiLineString(tuple(tuple(pos(c) for c in line) for line in raw))
    return MultiPolygon(
        tuple(tuple(tuple(pos(c) for c in ring) for ring in rings) for rings in raw)
    )
