"""KML conversion — composable pipeline.

Converts a KML document into a ``FeatureCollection``: one feature per
recognised Placemark geometry (several for a MultiGeometry mixing
kinds), geodesic lengths on line features, and a per-kind summary.

The pipeline is split into focused stages:
- **_validation**: well-formed XML check (the only fatal failure)
- **_coordinates**: ``<coordinates>`` text → ``Coordinate`` tuples
- **_extraction**: per-Placemark geometry dispatch
- **_measurement**: great-circle line lengths
- **_summary**: Placemark tally and per-kind counts

Malformed coordinate tokens, empty geometries, Placemarks without
geometry and failed length calculations are absorbed where they occur;
conversion always continues with everything that is recoverable.
"""

from __future__ import annotations

import logging

from kml_features.convert._constants import PLACEMARK
from kml_features.convert._coordinates import (
    parse_coordinate_token,
    parse_coordinates_element,
    parse_coordinates_text,
)
from kml_features.convert._extraction import extract_features, extract_geometries
from kml_features.convert._measurement import line_length, measure_length
from kml_features.convert._summary import summarize
from kml_features.convert._validation import parse_document
from kml_features.core.config import ConverterConfig
from kml_features.core.exceptions import KmlParseError
from kml_features.models.feature import Feature, FeatureCollection

logger = logging.getLogger("kml_features.convert")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "KmlParseError",
    "convert_kml",
    "extract_features",
    "extract_geometries",
    "line_length",
    "measure_length",
    "parse_coordinate_token",
    "parse_coordinates_element",
    "parse_coordinates_text",
    "parse_document",
    "summarize",
]


def convert_kml(
    document: str | bytes,
    *,
    config: ConverterConfig | None = None,
) -> FeatureCollection:
    """Convert a KML document into a measured, summarised feature collection.

    Every Placemark in the document is visited in document order, at any
    depth (Document and Folder nesting included).

    Args:
        document: Raw KML text or bytes.
        config: Converter settings; defaults are used when omitted.

    Returns:
        A ``FeatureCollection`` whose features follow document order
        and whose summary holds the Placemark tally and per-kind counts.

    Raises:
        KmlParseError: If the document is not well-formed XML.  No
            partial collection is produced.
    """
    config = config or ConverterConfig()
    root = parse_document(document, huge_tree=config.huge_tree)

    placemarks = list(root.iter(PLACEMARK))
    logger.info("Converting KML document | placemarks=%d", len(placemarks))

    features: list[Feature] = []
    for idx, placemark in enumerate(placemarks):
        extracted = extract_features(placemark)
        if not extracted:
            logger.debug("Placemark produced no features | index=%d", idx)
        for feature in extracted:
            if feature.is_line:
                feature = feature.with_length(
                    measure_length(feature.geometry, earth_radius_m=config.earth_radius_m)
                )
            features.append(feature)

    summary = summarize(features, len(placemarks))
    logger.info(
        "Converted KML document | placemarks=%d | features=%d | summary=%s",
        len(placemarks),
        len(features),
        summary,
    )
    return FeatureCollection(features=tuple(features), summary=summary)
