"""Feature and feature-collection models.

A Feature is one geometry plus its display properties (Placemark name,
description and, for line kinds, a geodesic length in metres).  A
FeatureCollection is the full result of converting one KML document.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from kml_features.models.geometry import (
    LINE_KINDS,
    Geometry,
    GeometryKind,
    geometry_from_geojson,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kml_features.models.document import FeatureCollectionDocument


@dataclass(frozen=True, slots=True)
class FeatureProperties:
    """Display properties attached to a feature.

    Attributes:
        name: Placemark ``<name>`` text (may be empty).
        description: Placemark ``<description>`` text (may be empty).
        length: Geodesic length in metres.  ``None`` for non-line kinds.
    """

    name: str = ""
    description: str = ""
    length: float | None = None

    def to_dict(self) -> dict[str, object]:
        props: dict[str, object] = {"name": self.name, "description": self.description}
        if self.length is not None:
            props["length"] = self.length
        return props


@dataclass(frozen=True, slots=True)
class Feature:
    """A single converted geometry with its properties."""

    geometry: Geometry
    properties: FeatureProperties = field(default_factory=FeatureProperties)

    @property
    def kind(self) -> GeometryKind:
        return self.geometry.kind

    @property
    def is_line(self) -> bool:
        """Whether this feature is measured (LineString or MultiLineString)."""
        return self.geometry.kind in LINE_KINDS

    def with_length(self, length: float) -> Feature:
        """Return a copy carrying ``length`` in its properties."""
        return replace(self, properties=replace(self.properties, length=length))

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON Feature dict."""
        return {
            "type": "Feature",
            "geometry": self.geometry.to_geojson(),
            "properties": self.properties.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Feature:
        """Deserialise from a GeoJSON Feature dict.

        Missing properties are defaulted (an absent ``name`` becomes
        ``""``) rather than raising an error.

        Raises:
            TypeError: If ``geometry`` or ``properties`` are not dicts.
            ValueError: If the geometry type is not supported.
        """
        geometry_raw = data.get("geometry")
        if not isinstance(geometry_raw, dict):
            msg = f"geometry must be a dict, got {type(geometry_raw).__name__}"
            raise TypeError(msg)

        props_raw = data.get("properties", {})
        if not isinstance(props_raw, dict):
            msg = f"properties must be a dict, got {type(props_raw).__name__}"
            raise TypeError(msg)

        length_raw = props_raw.get("length")
        return cls(
            geometry=geometry_from_geojson(geometry_raw),
            properties=FeatureProperties(
                name=str(props_raw.get("name", "")),
                description=str(props_raw.get("description", "")),
                length=float(length_raw) if length_raw is not None else None,
            ),
        )


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """All features converted from one document, plus the per-kind summary.

    Attributes:
        features: Features in source-document order.
        summary: ``{"Placemark": n, <kind name>: count, ...}``, read-only.
    """

    features: tuple[Feature, ...] = ()
    summary: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))

    def __len__(self) -> int:
        return len(self.features)

    def by_kind(self, kind: GeometryKind) -> list[Feature]:
        """Features of a single geometry kind, in collection order."""
        return [f for f in self.features if f.kind is kind]

    def to_document(self) -> FeatureCollectionDocument:
        """Return the validated output document model."""
        from kml_features.models.document import FeatureCollectionDocument

        return FeatureCollectionDocument.from_collection(self)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON FeatureCollection dict (with ``summary``)."""
        return self.to_document().model_dump(mode="json", exclude_none=True)
