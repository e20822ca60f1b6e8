"""Validates untrusted fallback marker dicts into RawMeasurements."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from labextract.extraction.models import RawMeasurement
from labextract.fallback.exceptions import FallbackValidationError
from labextract.logging.logger import Log

_MAX_MARKERS = 100


def validate_markers(raw: Sequence[Mapping[str, Any]]) -> list[RawMeasurement]:
    """Build a RawMeasurement for every valid item; invalid items are dropped."""
    if len(raw) > _MAX_MARKERS:
        Log.warning(f"Too many fallback markers: {len(raw)} (keeping {_MAX_MARKERS})")
        raw = raw[:_MAX_MARKERS]
    measurements: list[RawMeasurement] = []
    for i, item in enumerate(raw):
        try:
            measurements.append(validate_marker(item, i))
        except FallbackValidationError as exc:
            Log.warning(f"Dropping fallback marker: {exc}")
    return measurements


def validate_marker(raw: Any, index: int) -> RawMeasurement:
    """Validate one marker dict.

    Raises:
        FallbackValidationError: on any validation failure.
    """
    if not isinstance(raw, Mapping):
        raise FallbackValidationError(f"Marker at index {index} must be an object")
    code = raw.get("code")
    if not code or not isinstance(code, str):
        raise FallbackValidationError(
            f"Marker at index {index}: 'code' must be a non-empty string"
        )
    name = raw.get("name")
    if not name or not isinstance(name, str):
        raise FallbackValidationError(
            f"Marker at index {index}: 'name' must be a non-empty string"
        )
    value = raw.get("value")
    if not _is_number(value):
        raise FallbackValidationError(
            f"Marker at index {index}: 'value' must be a number"
        )
    unit = raw.get("unit") or ""
    if not isinstance(unit, str):
        raise FallbackValidationError(
            f"Marker at index {index}: 'unit' must be a string"
        )
    return RawMeasurement(
        code=code.strip(),
        name=name.strip(),
        value=float(value),
        unit=unit.strip(),
        ref_range_low=_optional_number(raw, "ref_range_low", index),
        ref_range_high=_optional_number(raw, "ref_range_high", index),
        category=_optional_string(raw, "category", index),
        flag=_optional_string(raw, "flag", index),
    )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _optional_number(raw: Mapping[str, Any], field: str, index: int) -> float | None:
    value = raw.get(field)
    if value is None:
        return None
    if not _is_number(value):
        raise FallbackValidationError(
            f"Marker at index {index}: '{field}' must be a number or null"
        )
    return float(value)


def _optional_string(raw: Mapping[str, Any], field: str, index: int) -> str | None:
    value = raw.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise FallbackValidationError(
            f"Marker at index {index}: '{field}' must be a string or null"
        )
    return value.strip() or None
