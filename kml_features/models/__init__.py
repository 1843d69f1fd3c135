"""Data models and schemas.

Defines the data structures produced by the converter:
- Geometry: closed set of geometry value types (Point ... MultiPolygon)
- Feature: one geometry plus name/description/length properties
- FeatureCollection: all features of a document plus the summary
- FeatureCollectionDocument: pydantic schema of the serialised output
"""

from kml_features.models.feature import Feature, FeatureCollection, FeatureProperties
from kml_features.models.geometry import (
    Coordinate,
    Geometry,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "Coordinate",
    "Feature",
    "FeatureCollection",
    "FeatureProperties",
    "Geometry",
    "GeometryKind",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
