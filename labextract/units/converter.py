"""Raw lab value to SI conversion.

Conversion never raises for data problems: a value that is not a number, or
a marker/unit pair with no rule, is returned exactly as it was given.
"""

import math
import re
from collections.abc import Mapping

from labextract.units.conversion_table import (
    CONVERSIONS,
    MARKER_ALIASES,
    REASONABLE_RANGES,
    SI_UNITS,
)
from labextract.units.models import Conversion, SIValue

_SEPARATORS_RE = re.compile(r"[\s\-]+")
_PUNCTUATION_RE = re.compile(r"[^a-z0-9_]")
_UNDERSCORES_RE = re.compile(r"_+")
_MICRO_SIGNS = ("µ", "μ")


def normalize_marker_key(marker: str, aliases: Mapping[str, str] = MARKER_ALIASES) -> str:
    """Turn a marker name or code into its canonical lookup key.

    >>> normalize_marker_key("Total Cholesterol")
    'cholesterol'
    >>> normalize_marker_key("LDL")
    'ldl_cholesterol'
    """
    key = _SEPARATORS_RE.sub("_", marker.strip().lower())
    key = _PUNCTUATION_RE.sub("", key)
    key = _UNDERSCORES_RE.sub("_", key).strip("_")
    return aliases.get(key, key)


def normalize_unit_key(unit: str) -> str:
    """Lowercase *unit*, drop whitespace and fold micro signs to ``u``."""
    key = "".join(unit.split()).lower()
    for sign in _MICRO_SIGNS:
        key = key.replace(sign, "u")
    return key.replace("×", "x")


def is_si_unit(unit: str) -> bool:
    return normalize_unit_key(unit) in SI_UNITS


def _as_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class UnitConverter:
    """Maps (marker, value, unit) to its SI representation using a rule table.

    Rule keys are ``"{marker_key}_{unit_key}"``; unit keys never contain an
    underscore, so the marker key is everything before the last one.
    """

    def __init__(
        self,
        conversions: Mapping[str, Conversion] | None = None,
        aliases: Mapping[str, str] | None = None,
        reasonable_ranges: Mapping[str, Mapping[str, tuple[float, float]]] | None = None,
    ) -> None:
        self._conversions = conversions if conversions is not None else CONVERSIONS
        self._aliases = aliases if aliases is not None else MARKER_ALIASES
        self._ranges = reasonable_ranges if reasonable_ranges is not None else REASONABLE_RANGES
        self._by_marker: dict[str, dict[str, Conversion]] = {}
        for key, conversion in self._conversions.items():
            marker_key, _, unit_key = key.rpartition("_")
            self._by_marker.setdefault(marker_key, {})[unit_key] = conversion

    def lookup(self, marker: str, unit: str) -> Conversion | None:
        """Return the rule for this marker/unit pair, if one exists."""
        key = f"{self._marker_key(marker)}_{normalize_unit_key(unit)}"
        return self._conversions.get(key)

    def convert(self, marker: str, value: float | str | None, unit: str) -> SIValue:
        """Convert *value* in *unit* to the SI unit for *marker*.

        Non-numeric values and unknown marker/unit pairs pass through
        unchanged, including units that are already in SI form.
        """
        number = _as_number(value)
        if number is None:
            return SIValue(value=value, unit=unit)

        conversion = self.lookup(marker, unit)
        if conversion is None:
            return SIValue(value=value, unit=unit)

        if conversion.operation == "divide":
            converted = number / conversion.factor
        else:
            converted = number * conversion.factor
        return SIValue(value=round(converted, 2), unit=conversion.si_unit)

    def from_si(self, marker: str, value: float | str | None, unit: str) -> float | None:
        """Convert an SI *value* back into *unit*.

        Returns None for a non-numeric value; with no rule for *unit* the
        number is returned as is.
        """
        number = _as_number(value)
        if number is None:
            return None
        conversion = self.lookup(marker, unit)
        if conversion is None:
            return number
        if conversion.operation == "divide":
            return round(number * conversion.factor, 2)
        return round(number / conversion.factor, 2)

    def canonical_unit(self, marker: str) -> str:
        """SI unit the rules for *marker* convert into, or ``""`` when unknown."""
        rules = self._by_marker.get(self._marker_key(marker))
        if not rules:
            return ""
        return next(iter(rules.values())).si_unit

    def supported_units(self, marker: str) -> list[str]:
        """Unit keys *marker* can be given in, its SI unit included."""
        rules = self._by_marker.get(self._marker_key(marker))
        if not rules:
            return []
        units = list(rules)
        si_key = normalize_unit_key(self.canonical_unit(marker))
        if si_key not in units:
            units.append(si_key)
        return units

    def is_valid_unit(self, marker: str, unit: str) -> bool:
        return normalize_unit_key(unit) in self.supported_units(marker)

    def conversion_factor(self, marker: str, from_unit: str, to_unit: str) -> float | None:
        """Multiplier taking a *marker* value from *from_unit* to *to_unit*.

        Both units must be supported for the marker; otherwise None.
        """
        source = self._si_multiplier(marker, from_unit)
        target = self._si_multiplier(marker, to_unit)
        if source is None or target is None:
            return None
        return source / target

    def is_reasonable_value(self, marker: str, value: float | str | None, unit: str) -> bool:
        """Whether *value* is plausible for *marker* in *unit*.

        Non-numeric and negative values never are; a value with no known
        range for this marker and unit always is.
        """
        number = _as_number(value)
        if number is None or number < 0:
            return False
        bounds = self._ranges.get(self._marker_key(marker), {}).get(normalize_unit_key(unit))
        if bounds is None:
            return True
        low, high = bounds
        return low <= number <= high

    def _marker_key(self, marker: str) -> str:
        return normalize_marker_key(marker, self._aliases)

    def _si_multiplier(self, marker: str, unit: str) -> float | None:
        rules = self._by_marker.get(self._marker_key(marker))
        if not rules:
            return None
        unit_key = normalize_unit_key(unit)
        conversion = rules.get(unit_key)
        if conversion is not None:
            if conversion.operation == "divide":
                return 1 / conversion.factor
            return float(conversion.factor)
        if unit_key == normalize_unit_key(self.canonical_unit(marker)):
            return 1.0
        return None


_DEFAULT_CONVERTER = UnitConverter()


def convert_to_si(marker: str, value: float | str | None, unit: str) -> SIValue:
    """Convert with the built-in conversion table."""
    return _DEFAULT_CONVERTER.convert(marker, value, unit)
