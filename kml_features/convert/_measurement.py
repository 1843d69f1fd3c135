"""Geodesic length measurement for line features.

Lengths are great-circle distances on a sphere (``pyproj.Geod`` with
zero flattening), summed over consecutive vertices.  Altitude is
ignored.  With the default mean Earth radius one degree of arc is about
111 195 m.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import TYPE_CHECKING

from kml_features.core.constants import MEAN_EARTH_RADIUS_M
from kml_features.models.geometry import LineString, MultiLineString

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pyproj import Geod

    from kml_features.models.geometry import Coordinate, Geometry

logger = logging.getLogger("kml_features.convert")

# A single vertex has no segments to measure
MIN_LINE_VERTICES = 2


def measure_length(geometry: Geometry, *, earth_radius_m: float = MEAN_EARTH_RADIUS_M) -> float:
    """Return the geodesic length in metres of a line geometry.

    ``MultiLineString`` lengths are the sum of independent per-line
    lengths.  A failure inside the calculation, including a non-finite
    result such as pyproj gives for latitudes beyond 90 degrees, is logged
    and measured as ``0.0`` so one bad line never aborts a conversion.

    Raises:
        TypeError: If ``geometry`` is not a LineString or MultiLineString.
    """
    if isinstance(geometry, LineString):
        lines: Sequence[Sequence[Coordinate]] = [geometry.coordinates]
    elif isinstance(geometry, MultiLineString):
        lines = geometry.lines
    else:
        msg = f"Length is only defined for line geometries, got {geometry.kind.value}"
        raise TypeError(msg)

    try:
        geod = _sphere(earth_radius_m)
        total = float(sum(line_length(line, geod) for line in lines))
        if not math.isfinite(total):
            msg = f"non-finite length {total}"
            raise ValueError(msg)
        return total
    except Exception as exc:
        logger.warning(
            "Length calculation failed, using 0 | kind=%s | error=%s",
            geometry.kind.value,
            exc,
        )
        return 0.0


def line_length(coords: Sequence[Coordinate], geod: Geod) -> float:
    """Sum of great-circle segment lengths along ``coords`` in metres."""
    if len(coords) < MIN_LINE_VERTICES:
        return 0.0
    lons = [c.lon for c in coords]
    lats = [c.lat for c in coords]
    return float(geod.line_length(lons, lats))


@lru_cache(maxsize=8)
def _sphere(radius_m: float) -> Geod:
    from pyproj import Geod

    return Geod(a=radius_m, f=0.0)

