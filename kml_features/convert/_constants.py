"""Element names matched while walking a KML document.

Paths use lxml's ``{*}`` wildcard so documents in the KML 2.2 namespace,
older KML namespaces, or no namespace at all are handled alike.
"""

from __future__ import annotations

PLACEMARK = "{*}Placemark"
NAME = "{*}name"
DESCRIPTION = "{*}description"

POINT = "{*}Point"
LINE_STRING = "{*}LineString"
POLYGON = "{*}Polygon"
MULTI_GEOMETRY = "{*}MultiGeometry"

COORDINATES = "{*}coordinates"
OUTER_RING_COORDINATES = "{*}outerBoundaryIs/{*}LinearRing/{*}coordinates"
