"""KML ``<coordinates>`` text parsing.

Coordinate blocks are whitespace-separated ``lon,lat[,alt]`` tuples.
Parsing is lenient: a tuple whose longitude or latitude is not a finite
number is dropped, and the rest of the block is still returned.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from kml_features.models.geometry import Coordinate

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_features.convert")


def parse_coordinates_text(text: str) -> list[Coordinate]:
    """Parse KML coordinate text (``lon,lat,alt lon,lat,alt ...``) to coordinates."""
    coords: list[Coordinate] = []
    for token in text.split():
        coord = parse_coordinate_token(token)
        if coord is None:
            logger.debug("Dropping malformed coordinate token %r", token)
            continue
        coords.append(coord)
    return coords


def parse_coordinates_element(elem: _Element | None) -> list[Coordinate]:
    """Parse the text of a ``<coordinates>`` element; ``[]`` when it is missing."""
    if elem is None:
        return []
    return parse_coordinates_text("".join(elem.itertext()))


def parse_coordinate_token(token: str) -> Coordinate | None:
    """Parse one ``lon,lat[,alt]`` token, or return ``None`` if unusable.

    Parts past the altitude are ignored.  An altitude that is not a
    finite number is treated as absent rather than spoiling the tuple.
    """
    parts = token.split(",")
    if len(parts) < 2:
        return None

    lon = _finite_float(parts[0])
    lat = _finite_float(parts[1])
    if lon is None or lat is None:
        return None

    alt = _finite_float(parts[2]) if len(parts) > 2 else None
    return Coordinate(lon, lat, alt)


def _finite_float(text: str) -> float | None:
    # float() accepts digit separators such as "1_0"; KML numbers do not
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None
