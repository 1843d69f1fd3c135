"""Shared converter constants — single source of truth."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

PLACEMARK_TALLY_LABEL: str = "Placemark"
"""Summary key holding the number of Placemark elements in the source."""

# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

MEAN_EARTH_RADIUS_M: float = 6_371_008.8
"""Mean Earth radius in metres used for spherical great-circle lengths."""

# ---------------------------------------------------------------------------
# Ingress
# ---------------------------------------------------------------------------

DEFAULT_MAX_UPLOAD_BYTES: int = 50 * 1024 * 1024
"""Largest request body the HTTP boundary accepts."""

KML_FILE_SUFFIX: str = ".kml"

INVALID_FILE_MESSAGE: str = "Invalid KML file"
"""Generic error shown to users when a document cannot be converted."""
