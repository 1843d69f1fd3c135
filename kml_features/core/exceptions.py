"""Converter exception taxonomy.

Every domain exception inherits from ``ConversionError`` and carries
structured context fields (stage and code) so the HTTP boundary can
report failures consistently.

Only document-level problems are raised.  Per-coordinate, per-feature
and per-measurement problems are absorbed where they occur and never
reach this hierarchy.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for responses and logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all converter-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_kml"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""
    #: Category reported in ``to_error_dict()``.
    category: str = "conversion"

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class KmlParseError(ConversionError):
    """Raised when a document is not well-formed XML.

    This is the only failure ``convert_kml`` surfaces; no partial
    collection is returned alongside it.
    """

    default_stage = "parse_kml"
    default_code = "KML_PARSE_FAILED"
    category = "document"


class UploadRejectedError(ConversionError):
    """Raised by the ingress when an upload is refused before parsing."""

    default_stage = "ingress"
    default_code = "UPLOAD_REJECTED"
    category = "validation"
