"""Tests for the convert_kml document converter.

Covers:
- Single Point scenario (01_single_point.kml)
- Nested Folders, polygon closure and geometry-less Placemarks
  (02_trail_network.kml)
- MultiGeometry grouping (03_multigeometry_mixed.kml)
- Documents without the KML namespace (04_no_namespace.kml)
- Malformed XML rejection (11_*, 12_*)
- Empty documents and unreadable coordinates (13_*, 14_*)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from kml_features.convert import KmlParseError, convert_kml
from kml_features.core.config import ConverterConfig
from kml_features.models.feature import FeatureCollection
from kml_features.models.geometry import (
    Coordinate,
    GeometryKind,
    MultiLineString,
    MultiPoint,
    Point,
)

ONE_DEGREE_M = math.pi * 6_371_008.8 / 180.0
LINE_KINDS = {GeometryKind.LINE_STRING, GeometryKind.MULTI_LINE_STRING}


def _check_collection_invariants(collection: FeatureCollection) -> None:
    """Properties that hold for every converted document."""
    kind_total = sum(v for k, v in collection.summary.items() if k != "Placemark")
    assert kind_total == len(collection.features)
    for feature in collection.features:
        has_length = feature.properties.length is not None
        assert has_length == (feature.kind in LINE_KINDS)


class TestSinglePoint:
    """One Placemark with a Point."""

    def test_single_point_scenario(self, single_point_kml: Path) -> None:
        collection = convert_kml(single_point_kml.read_text(encoding="utf-8"))

        assert len(collection.features) == 1
        feature = collection.features[0]
        assert feature.geometry == Point(Coordinate(10.0, 20.0))
        assert feature.properties.name == "A"
        assert feature.properties.description == "Trailhead parking"
        assert feature.properties.length is None
        assert collection.summary == {"Placemark": 1, "Point": 1}

    def test_bytes_input(self, single_point_kml: Path) -> None:
        collection = convert_kml(single_point_kml.read_bytes())
        assert collection.summary == {"Placemark": 1, "Point": 1}

    def test_serialised_point_has_no_length(self, single_point_kml: Path) -> None:
        data = convert_kml(single_point_kml.read_bytes()).to_dict()
        assert data["type"] == "FeatureCollection"
        [feature] = data["features"]
        assert feature["geometry"] == {"type": "Point", "coordinates": [10.0, 20.0]}
        assert "length" not in feature["properties"]


class TestTrailNetwork:
    """Folders, a measured line, a closed polygon and a Placemark without geometry."""

    def test_document_order_through_folders(self, trail_network_kml: Path) -> None:
        collection = convert_kml(trail_network_kml.read_bytes())
        assert [f.properties.name for f in collection.features] == [
            "Meridian trail",
            "Campground",
        ]

    def test_line_length_attached(self, trail_network_kml: Path) -> None:
        collection = convert_kml(trail_network_kml.read_bytes())
        [line] = collection.by_kind(GeometryKind.LINE_STRING)
        assert line.properties.length == pytest.approx(ONE_DEGREE_M, rel=1e-6)

    def test_line_keeps_altitude(self, trail_network_kml: Path) -> None:
        collection = convert_kml(trail_network_kml.read_bytes())
        [line] = collection.by_kind(GeometryKind.LINE_STRING)
        assert [c.alt for c in line.geometry.coordinates] == [100.0, 120.0, 140.0]

    def test_polygon_is_closed(self, trail_network_kml: Path) -> None:
        collection = convert_kml(trail_network_kml.read_bytes())
        [polygon] = collection.by_kind(GeometryKind.POLYGON)
        ring = polygon.geometry.rings[0]
        assert len(ring) == 5
        assert ring[0] == ring[-1]
        assert polygon.properties.length is None
        assert polygon.properties.description == "<b>Open</b> May to September"

    def test_placemark_without_geometry_counted(self, trail_network_kml: Path) -> None:
        collection = convert_kml(trail_network_kml.read_bytes())
        assert collection.summary == {"Placemark": 3, "LineString": 1, "Polygon": 1}
        _check_collection_invariants(collection)


class TestMultiGeometry:
    """Grouped geometries inside one Placemark."""

    def test_mixed_grouping(self, multigeometry_kml: Path) -> None:
        collection = convert_kml(multigeometry_kml.read_bytes())

        assert [f.kind for f in collection.features] == [
            GeometryKind.MULTI_LINE_STRING,
            GeometryKind.MULTI_POINT,
            GeometryKind.MULTI_POLYGON,
        ]
        assert collection.summary == {
            "Placemark": 1,
            "MultiLineString": 1,
            "MultiPoint": 1,
            "MultiPolygon": 1,
        }
        assert all(f.properties.name == "Ridge route" for f in collection.features)
        _check_collection_invariants(collection)

    def test_grouped_line_length_is_sum_of_parts(self, multigeometry_kml: Path) -> None:
        collection = convert_kml(multigeometry_kml.read_bytes())
        [lines] = collection.by_kind(GeometryKind.MULTI_LINE_STRING)
        assert isinstance(lines.geometry, MultiLineString)
        # (0,0)->(0,1) is one degree; (0,1)->(1,1) is a little shorter
        assert lines.properties.length == pytest.approx(222_373, rel=1e-3)

    def test_two_lines_and_a_point(self) -> None:
        document = """<?xml version="1.0" encoding="UTF-8"?>
        <kml xmlns="http://www.opengis.net/kml/2.2"><Placemark>
          <MultiGeometry>
            <LineString><coordinates>0,0 0,1</coordinates></LineString>
            <LineString><coordinates>1,0 1,1</coordinates></LineString>
            <Point><coordinates>5,5</coordinates></Point>
          </MultiGeometry>
        </Placemark></kml>"""
        collection = convert_kml(document)

        assert len(collection.features) == 2
        lines, points = collection.features
        assert isinstance(lines.geometry, MultiLineString)
        assert len(lines.geometry.lines) == 2
        assert points.geometry == MultiPoint((Coordinate(5.0, 5.0),))
        assert points.properties.length is None
        assert collection.summary == {"Placemark": 1, "MultiLineString": 1, "MultiPoint": 1}


class TestNamespaces:
    """Namespace-agnostic element matching."""

    def test_no_namespace_document(self, no_namespace_kml: Path) -> None:
        collection = convert_kml(no_namespace_kml.read_bytes())
        assert collection.summary == {"Placemark": 1, "LineString": 1}
        assert collection.features[0].properties.length == pytest.approx(
            ONE_DEGREE_M, rel=1e-6
        )


class TestMalformedInput:
    """Rejection of input that is not well-formed XML."""

    def test_malformed_not_xml(self, not_xml_kml: Path) -> None:
        with pytest.raises(KmlParseError) as exc_info:
            convert_kml(not_xml_kml.read_bytes())
        assert "Not valid XML" in str(exc_info.value)
        assert exc_info.value.code == "KML_PARSE_FAILED"

    def test_malformed_unclosed_tags(self, unclosed_tags_kml: Path) -> None:
        with pytest.raises(KmlParseError):
            convert_kml(unclosed_tags_kml.read_bytes())

    @pytest.mark.parametrize("document", ["", "   \n", b""])
    def test_blank_document(self, document: str | bytes) -> None:
        with pytest.raises(KmlParseError, match="empty"):
            convert_kml(document)


class TestEdgeCases:
    """Documents that convert with little or nothing to show."""

    def test_empty_document(self, empty_kml: Path) -> None:
        collection = convert_kml(empty_kml.read_bytes())
        assert collection.features == ()
        assert collection.summary == {"Placemark": 0}
        assert collection.to_dict() == {
            "type": "FeatureCollection",
            "features": [],
            "summary": {"Placemark": 0},
        }

    def test_unreadable_coordinates_absorbed(self, bad_coordinates_kml: Path) -> None:
        collection = convert_kml(bad_coordinates_kml.read_bytes())

        assert collection.summary == {"Placemark": 3, "LineString": 1}
        [line] = collection.features
        assert [(c.lon, c.lat) for c in line.geometry.coordinates] == [(1.0, 2.0), (5.0, 6.0)]
        assert line.properties.length > 0
        _check_collection_invariants(collection)

    def test_any_root_element_accepted(self) -> None:
        collection = convert_kml("<gpx><trk/></gpx>")
        assert collection.summary == {"Placemark": 0}

    def test_line_beyond_pole_keeps_finite_length(self) -> None:
        collection = convert_kml(
            "<kml><Placemark><LineString><coordinates>0,89 0,95</coordinates>"
            "</LineString></Placemark></kml>"
        )
        [line] = collection.features
        assert [c.lat for c in line.geometry.coordinates] == [89.0, 95.0]
        assert line.properties.length == 0.0

    def test_root_placemark(self) -> None:
        collection = convert_kml(
            "<Placemark><Point><coordinates>1,2</coordinates></Point></Placemark>"
        )
        assert collection.summary == {"Placemark": 1, "Point": 1}

    def test_entities_are_not_resolved(self) -> None:
        document = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE kml [<!ENTITY where "10,20">]>'
            "<kml><Placemark><Point><coordinates>&where;</coordinates></Point></Placemark></kml>"
        )
        collection = convert_kml(document)
        assert collection.summary == {"Placemark": 1}


class TestConfigAndLogging:
    """Converter settings and log output."""

    def test_custom_earth_radius(self, no_namespace_kml: Path) -> None:
        config = ConverterConfig(earth_radius_m=1_000.0)
        collection = convert_kml(no_namespace_kml.read_bytes(), config=config)
        assert collection.features[0].properties.length == pytest.approx(
            math.pi * 1_000.0 / 180.0, rel=1e-6
        )

    def test_conversion_is_logged(
        self, trail_network_kml: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="kml_features.convert"):
            convert_kml(trail_network_kml.read_bytes())
        assert "placemarks=3" in caplog.text
        assert "features=2" in caplog.text

    def test_repeated_conversion_is_independent(self, single_point_kml: Path) -> None:
        content = single_point_kml.read_bytes()
        first = convert_kml(content)
        second = convert_kml(content)
        assert first == second
        assert first is not second
