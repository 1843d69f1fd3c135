"""Row builders for tabular display of a converted collection.

Table views show the summary as ``(label, count)`` pairs and each
feature as ``(kind, name, length)`` with placeholder text for missing
values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from kml_features.models.feature import Feature, FeatureCollection

UNNAMED = "Unnamed"
NO_LENGTH = "N/A"


class FeatureRow(NamedTuple):
    kind: str
    name: str
    length: str


def format_length(length: float | None) -> str:
    """Format metres with two decimals; ``"N/A"`` for a missing or zero length."""
    if not length:
        return NO_LENGTH
    return f"{length:.2f} m"


def feature_row(feature: Feature) -> FeatureRow:
    props = feature.properties
    return FeatureRow(
        kind=feature.kind.value,
        name=props.name or UNNAMED,
        length=format_length(props.length),
    )


def feature_rows(collection: FeatureCollection) -> list[FeatureRow]:
    """One display row per feature, in collection order."""
    return [feature_row(f) for f in collection.features]


def summary_rows(collection: FeatureCollection) -> list[tuple[str, int]]:
    """Summary entries as ``(label, count)`` pairs, Placemark tally first."""
    return list(collection.summary.items())
