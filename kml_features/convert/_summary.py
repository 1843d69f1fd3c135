"""Summary aggregation: Placemark tally plus per-geometry-kind counts."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from kml_features.core.constants import PLACEMARK_TALLY_LABEL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_features.models.feature import Feature


def summarize(features: Iterable[Feature], placemark_count: int) -> dict[str, int]:
    """Count Placemarks and produced features per geometry kind.

    The Placemark entry counts every source Placemark, including ones
    that produced no feature.  Kinds with no features are left out
    rather than reported as zero.  Kind entries follow first-seen order.
    """
    summary: dict[str, int] = {PLACEMARK_TALLY_LABEL: placemark_count}
    summary.update(Counter(feature.kind.value for feature in features))
    return summary
