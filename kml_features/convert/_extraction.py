"""Per-Placemark geometry extraction.

Each Placemark is checked for geometry in a fixed order and the first
match wins:

1. ``Point``
2. ``LineString``
3. ``Polygon`` (outer ring via ``outerBoundaryIs/LinearRing`` only)
4. ``MultiGeometry``

Only direct children of the Placemark are considered.  Inside a
``MultiGeometry`` the direct ``LineString``, ``Point`` and ``Polygon``
children are all collected, giving up to three features in the order
MultiLineString, MultiPoint, MultiPolygon.  A nested ``MultiGeometry``
is not descended into.

Geometry elements with no usable coordinates contribute nothing, and a
Placemark without recognised geometry yields no features.  None of these
cases raise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_features.convert._constants import (
    COORDINATES,
    DESCRIPTION,
    LINE_STRING,
    MULTI_GEOMETRY,
    NAME,
    OUTER_RING_COORDINATES,
    POINT,
    POLYGON,
)
from kml_features.convert._coordinates import parse_coordinates_element
from kml_features.models.feature import Feature, FeatureProperties
from kml_features.models.geometry import (
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
    close_ring,
)

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_features.convert")


def extract_features(placemark: _Element) -> list[Feature]:
    """Extract the features described by one Placemark element.

    Returns an empty list when the Placemark has no recognised geometry
    or only geometry without usable coordinates.  Lengths are not set
    here; line features are measured by the caller.
    """
    properties = FeatureProperties(
        name=_child_text(placemark, NAME),
        description=_child_text(placemark, DESCRIPTION),
    )
    return [Feature(geometry, properties) for geometry in extract_geometries(placemark)]


def extract_geometries(placemark: _Element) -> list[Geometry]:
    """Return the geometries of one Placemark in output order."""
    point = placemark.find(POINT)
    if point is not None:
        return _optional(_point(point))

    line = placemark.find(LINE_STRING)
    if line is not None:
        return _optional(_line_string(line))

    polygon = placemark.find(POLYGON)
    if polygon is not None:
        return _optional(_polygon(polygon))

    group = placemark.find(MULTI_GEOMETRY)
    if group is not None:
        return _multi_geometry(group)

    logger.debug("Placemark has no recognised geometry | name=%s", _child_text(placemark, NAME))
    return []


# ---------------------------------------------------------------------------
# Single geometries
# ---------------------------------------------------------------------------


def _point(elem: _Element) -> Point | None:
    coord = _first_coordinate(elem)
    return Point(coord) if coord is not None else None


def _line_string(elem: _Element) -> LineString | None:
    coords = _coordinates(elem)
    return LineString(tuple(coords)) if coords else None


def _polygon(elem: _Element) -> Polygon | None:
    ring = _outer_ring(elem)
    return Polygon((ring,)) if ring else None


# ---------------------------------------------------------------------------
# MultiGeometry
# ---------------------------------------------------------------------------


def _multi_geometry(group: _Element) -> list[Geometry]:
    geometries: list[Geometry] = []

    lines = [tuple(c) for c in (_coordinates(e) for e in group.findall(LINE_STRING)) if c]
    if lines:
        geometries.append(MultiLineString(tuple(lines)))

    points = [c for c in (_first_coordinate(e) for e in group.findall(POINT)) if c is not None]
    if points:
        geometries.append(MultiPoint(tuple(points)))

    polygons = [(r,) for r in (_outer_ring(e) for e in group.findall(POLYGON)) if r]
    if polygons:
        geometries.append(MultiPolygon(tuple(polygons)))

    return geometries


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _coordinates(elem: _Element) -> list[Coordinate]:
    return parse_coordinates_element(elem.find(COORDINATES))


def _first_coordinate(elem: _Element) -> Coordinate | None:
    coords = _coordinates(elem)
    return coords[0] if coords else None


def _outer_ring(polygon_elem: _Element) -> Ring:
    """Closed outer ring of a Polygon element; empty when it has no coordinates."""
    return close_ring(parse_coordinates_element(polygon_elem.find(OUTER_RING_COORDINATES)))


def _child_text(parent: _Element, path: str) -> str:
    """Text content of the first matching child, ``""`` if absent."""
    elem = parent.find(path)
    if elem is None:
        return ""
    return "".join(elem.itertext())


def _optional(geometry: Geometry | None) -> list[Geometry]:
    return [geometry] if geometry is not None else []
