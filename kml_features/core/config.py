"""Converter configuration loaded from environment variables.

All configuration values have sensible defaults.  Azure Functions app
settings (or ``local.settings.json`` for local dev) are the source of
truth when running behind the HTTP entry point.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_features.core.constants import DEFAULT_MAX_UPLOAD_BYTES, MEAN_EARTH_RADIUS_M
from kml_features.core.exceptions import ConversionError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class ConfigValidationError(ConversionError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"
    category = "validation"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        earth_radius_m: Sphere radius in metres for great-circle lengths.
        huge_tree: Lift lxml's depth and text-size safety limits.
        max_upload_bytes: Largest body the ingress will pass to the converter.
    """

    earth_radius_m: float = MEAN_EARTH_RADIUS_M
    huge_tree: bool = False
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``KML_EARTH_RADIUS_M=abc``).
        """
        config = cls(
            earth_radius_m=float(os.getenv("KML_EARTH_RADIUS_M", str(MEAN_EARTH_RADIUS_M))),
            huge_tree=os.getenv("KML_HUGE_TREE", "false").strip().lower() in _TRUE_VALUES,
            max_upload_bytes=int(os.getenv("KML_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
        )
        _validate(config)
        return config


def _validate(config: ConverterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.earth_radius_m > 0:
        raise ConfigValidationError(
            "KML_EARTH_RADIUS_M",
            config.earth_radius_m,
            "must be > 0 (metres)",
        )

    if config.max_upload_bytes <= 0:
        raise ConfigValidationError(
            "KML_MAX_UPLOAD_BYTES",
            config.max_upload_bytes,
            "must be > 0 (bytes)",
        )
