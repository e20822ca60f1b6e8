from labextract.units.converter import (
    UnitConverter,
    convert_to_si,
    is_si_unit,
    normalize_marker_key,
    normalize_unit_key,
)
from labextract.units.models import Conversion, SIValue

__all__ = [
    "Conversion",
    "SIValue",
    "UnitConverter",
    "convert_to_si",
    "is_si_unit",
    "normalize_marker_key",
    "normalize_unit_key",
]
