"""Strategy A: find catalog markers by synonym anywhere in the text."""

import re
from collections.abc import Sequence
from typing import ClassVar

from labextract.catalog.catalog import MarkerCatalog
from labextract.catalog.models import CompiledMarker
from labextract.extraction.base import BaseExtractionStrategy
from labextract.extraction.categories import category_for_code
from labextract.extraction.models import RawMeasurement
from labextract.logging.logger import Log


class CatalogPatternStrategy(BaseExtractionStrategy):
    """Takes the first plausible measurement of each catalog marker.

    The synonym-anchored measurement regex is tried first; the entry's own
    extraction patterns are the fallback and only yield a bare value.
    """

    name = "catalog"

    RANGE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(\d+(?:\.\d+)?)\s*[-–—]\s*(\d+(?:\.\d+)?)"
    )
    MIN_VALUE: ClassVar[float] = 0.0
    MAX_VALUE: ClassVar[float] = 10000.0
    DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d")
    PREFIX_LOOKBACK: ClassVar[int] = 40

    def __init__(self, catalog: MarkerCatalog, reference_window: int = 100) -> None:
        self._catalog = catalog
        self._window = reference_window

    def extract(
        self,
        text: str,
        existing: Sequence[RawMeasurement] = (),
    ) -> list[RawMeasurement]:
        _ = existing
        found: list[RawMeasurement] = []
        for marker in self._catalog.compiled():
            try:
                measurement = self._match_marker(marker, text)
            except Exception as exc:
                Log.warning(
                    f"Catalog match failed for {marker.definition.code}, skipping: {exc}"
                )
                continue
            if measurement is not None:
                Log.debug(
                    f"Found {measurement.code}: {measurement.value} {measurement.unit}"
                )
                found.append(measurement)
        return found

    def _match_marker(self, marker: CompiledMarker, text: str) -> RawMeasurement | None:
        definition = marker.definition
        for match in marker.synonym_pattern.finditer(text):
            if self._is_excluded(marker, text, match.start("synonym")):
                continue
            value = float(match.group("value"))
            if not self._is_plausible(value):
                continue
            low, high = self._find_reference_range(text, match.start(), match.end())
            return RawMeasurement(
                name=definition.name,
                code=definition.code,
                value=value,
                unit=(match.group("unit") or "").rstrip(".-"),
                flag=match.group("flag") or None,
                ref_range_low=low,
                ref_range_high=high,
                category=category_for_code(definition.code),
            )

        for pattern in marker.extraction_patterns:
            for match in pattern.finditer(text):
                if self._is_excluded(marker, text, match.start()):
                    continue
                value = float(match.group(1))
                if not self._is_plausible(value):
                    continue
                low, high = self._find_reference_range(text, match.start(), match.end())
                return RawMeasurement(
                    name=definition.name,
                    code=definition.code,
                    value=value,
                    ref_range_low=low,
                    ref_range_high=high,
                    category=category_for_code(definition.code),
                )
        return None

    def _is_plausible(self, value: float) -> bool:
        return self.MIN_VALUE < value <= self.MAX_VALUE

    @classmethod
    def _is_excluded(cls, marker: CompiledMarker, text: str, position: int) -> bool:
        """True when the synonym at *position* is qualified into another test."""
        if marker.excluded_prefix is None:
            return False
        lookback = max(0, position - cls.PREFIX_LOOKBACK)
        return marker.excluded_prefix.search(text, lookback, position) is not None

    def _find_reference_range(
        self, text: str, start: int, end: int
    ) -> tuple[float | None, float | None]:
        """Look for ``low - high`` within the window around a match.

        The match's own line is searched first (after the value, then before
        the name). Neighbouring lines are used only while they carry no
        measurement of their own, so a row without a range never borrows
        the range printed for the next test.
        """
        lower = max(0, start - self._window)
        upper = min(len(text), end + self._window)
        line_start = max(lower, text.rfind("\n", 0, start) + 1)
        line_end = text.find("\n", end)
        if line_end == -1 or line_end > upper:
            line_end = upper

        for segment in (text[end:line_end], text[line_start:start]):
            match = self.RANGE_RE.search(segment)
            if match:
                return float(match.group(1)), float(match.group(2))

        following = text[line_end:upper].splitlines()
        preceding = reversed(text[lower:line_start].splitlines())
        for lines in (following, preceding):
            for line in lines:
                match = self.RANGE_RE.search(line)
                if match and not self.DIGIT_RE.search(line, 0, match.start()):
                    return float(match.group(1)), float(match.group(2))
                if self.DIGIT_RE.search(line):
                    break
        return None, None
