"""Azure Functions entry point — KML feature conversion.

Registers the HTTP function using the Python v2 programming model.

All business logic lives in the kml_features package. This file is purely
the wiring layer between the Azure Functions binding and application code.
"""

from __future__ import annotations

import json
import logging

import azure.functions as func

from kml_features.core.config import ConverterConfig
from kml_features.core.ingress import handle_kml_upload

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

logger = logging.getLogger("kml_features.function_app")

# Loaded once at startup; invalid settings fail the host fast.
CONFIG = ConverterConfig.from_env()


# ---------------------------------------------------------------------------
# HTTP: Convert an uploaded KML document
# ---------------------------------------------------------------------------


@app.function_name("convert_kml")
@app.route(route="convert", methods=["POST"])
def convert_kml_http(req: func.HttpRequest) -> func.HttpResponse:
    """Convert the KML document in the request body to a feature collection.

    The original file name may be passed as the ``filename`` query
    parameter; when present it must end in ``.kml``.
    """
    filename = req.params.get("filename", "")
    logger.info("Convert request | file=%s", filename or "<unnamed>")

    status_code, payload = handle_kml_upload(req.get_body(), filename, config=CONFIG)
    return func.HttpResponse(
        json.dumps(payload),
        status_code=status_code,
        mimetype="application/json",
    )
