"""Pydantic schema for the serialised feature-collection document.

This is the shape handed to rendering and table collaborators and
returned by the HTTP entry point: a GeoJSON ``FeatureCollection`` with
an extra top-level ``summary`` mapping.

Optional fields default to ``None`` and are dropped on dump with
``exclude_none=True``, so ``properties.length`` is absent (not null)
for non-line features.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from kml_features.models.geometry import GeometryKind

if TYPE_CHECKING:
    from kml_features.models.feature import Feature, FeatureCollection

Position = list[float]


class GeometryDocument(BaseModel):
    """GeoJSON geometry object.

    Attributes:
        type: One of the six supported GeoJSON geometry type names.
        coordinates: Nested position arrays; depth depends on ``type``.
    """

    type: GeometryKind
    coordinates: (
        Position | list[Position] | list[list[Position]] | list[list[list[Position]]]
    ) = Field(default_factory=list)


class PropertiesDocument(BaseModel):
    """Feature display properties.

    Attributes:
        name: Placemark name (may be empty).
        description: Placemark description (may be empty).
        length: Geodesic length in metres, only for line kinds.
    """

    name: str = ""
    description: str = ""
    length: float | None = None


class FeatureDocument(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: GeometryDocument
    properties: PropertiesDocument = Field(default_factory=PropertiesDocument)

    @classmethod
    def from_feature(cls, feature: Feature) -> FeatureDocument:
        geojson = feature.geometry.to_geojson()
        return cls(
            geometry=GeometryDocument(
                type=feature.kind,
                coordinates=geojson["coordinates"],  # type: ignore[arg-type]
            ),
            properties=PropertiesDocument(
                name=feature.properties.name,
                description=feature.properties.description,
                length=feature.properties.length,
            ),
        )


class FeatureCollectionDocument(BaseModel):
    """Top-level converter output document.

    Attributes:
        type: Always ``"FeatureCollection"``.
        features: Converted features in document order.
        summary: Placemark tally plus one count per produced geometry kind.
    """

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[FeatureDocument] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_collection(cls, collection: FeatureCollection) -> FeatureCollectionDocument:
        return cls(
            features=[FeatureDocument.from_feature(f) for f in collection.features],
            summary=dict(collection.summary),
        )
