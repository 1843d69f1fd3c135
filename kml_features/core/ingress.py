"""Thin ingress boundary helpers for the HTTP entry point.

Keeps ``function_app.py`` down to trigger bindings and handoff:

- **validate_upload** — refuses empty, oversized, or non-``.kml``
  uploads before any parsing happens.
- **handle_kml_upload** — runs the converter and maps the outcome to an
  HTTP status code and JSON-ready payload.

Whatever the underlying reason, a document that cannot be converted is
reported with the same generic "Invalid KML file" message; the
structured error fields are attached for diagnostics.
"""

from __future__ import annotations

import logging

from kml_features.convert import convert_kml
from kml_features.core.config import ConverterConfig
from kml_features.core.constants import INVALID_FILE_MESSAGE, KML_FILE_SUFFIX
from kml_features.core.exceptions import ConversionError, UploadRejectedError

logger = logging.getLogger("kml_features.core.ingress")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


def validate_upload(body: bytes, filename: str, *, max_bytes: int) -> None:
    """Check an upload is worth handing to the converter.

    Raises:
        UploadRejectedError: If the body is empty or too large, or the
            filename is given and does not end in ``.kml``.
    """
    if filename and not filename.lower().endswith(KML_FILE_SUFFIX):
        msg = f"Expected a {KML_FILE_SUFFIX} file, got '{filename}'"
        raise UploadRejectedError(msg)

    if not body:
        msg = "Upload body is empty"
        raise UploadRejectedError(msg)

    if len(body) > max_bytes:
        msg = f"Upload is {len(body)} bytes, limit is {max_bytes}"
        raise UploadRejectedError(msg)


def handle_kml_upload(
    body: bytes,
    filename: str = "",
    *,
    config: ConverterConfig | None = None,
) -> tuple[int, dict[str, object]]:
    """Convert an uploaded KML document for the HTTP response.

    Args:
        body: Raw request body.
        filename: Original file name, if the client sent one.
        config: Converter settings; defaults are used when omitted.

    Returns:
        ``(200, feature collection dict)`` on success, or
        ``(400, {"error": "Invalid KML file", ...})`` when the upload is
        rejected or the document cannot be parsed.
    """
    config = config or ConverterConfig()
    try:
        validate_upload(body, filename, max_bytes=config.max_upload_bytes)
        collection = convert_kml(body, config=config)
    except ConversionError as exc:
        logger.warning(
            "KML upload rejected | file=%s | code=%s | error=%s",
            filename or "<unnamed>",
            exc.code,
            exc.message,
        )
        return HTTP_BAD_REQUEST, {"error": INVALID_FILE_MESSAGE, **exc.to_error_dict()}

    return HTTP_OK, collection.to_dict()
