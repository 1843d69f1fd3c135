"""KML Feature Conversion.

Converts KML documents (Placemarks with Point, LineString, Polygon and
MultiGeometry content) into a GeoJSON-style feature collection with
geodesic line lengths and per-geometry-kind counts.
"""

__version__ = "0.1.0"
