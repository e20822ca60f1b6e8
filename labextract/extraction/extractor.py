"""Text extraction entry point: deterministic strategies plus optional fallback."""

from collections.abc import Mapping, Sequence

from labextract.catalog.catalog import MarkerCatalog, default_catalog
from labextract.config.settings import Settings
from labextract.extraction.base import BaseExtractionStrategy
from labextract.extraction.catalog_strategy import CatalogPatternStrategy
from labextract.extraction.categories import category_for_code
from labextract.extraction.code_deriver import derive_code_from_name
from labextract.extraction.models import CanonicalMarkerRecord, RawMeasurement
from labextract.extraction.table_strategy import TableRowStrategy
from labextract.fallback.base import BaseMarkerFallback
from labextract.fallback.exceptions import FallbackError
from labextract.fallback.factory import FallbackFactory
from labextract.fallback.validator import validate_markers
from labextract.logging.logger import Log
from labextract.units.converter import UnitConverter, is_si_unit


class TextExtractor:
    """Turns plain report text into canonical marker records.

    Strategies run in order and their results are concatenated. When fewer
    than ``min_markers`` records are found and a fallback is configured, its
    markers are validated, normalized and appended.
    """

    def __init__(
        self,
        catalog: MarkerCatalog | None = None,
        converter: UnitConverter | None = None,
        *,
        strategies: Sequence[BaseExtractionStrategy] | None = None,
        fallback: BaseMarkerFallback | None = None,
        min_markers: int = 3,
        reference_window: int = 100,
    ) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()
        self._converter = converter if converter is not None else UnitConverter()
        if strategies is None:
            strategies = (
                CatalogPatternStrategy(self._catalog, reference_window=reference_window),
                TableRowStrategy(self._catalog),
            )
        self._strategies = tuple(strategies)
        self._fallback = fallback
        self._min_markers = min_markers

    def extract(self, text: str) -> list[CanonicalMarkerRecord]:
        """Extract every recognizable measurement from *text*.

        Returns an empty list when nothing is found; never raises for
        report content.
        """
        if not text or not text.strip():
            return []

        measurements: list[RawMeasurement] = []
        for strategy in self._strategies:
            found = strategy.extract(text, tuple(measurements))
            Log.debug(f"Strategy {strategy.name} found {len(found)} markers")
            measurements.extend(found)

        records = [self.to_record(m) for m in measurements]
        if len(records) < self._min_markers and self._fallback is not None:
            Log.info(
                f"Pattern matching found only {len(records)} markers, trying fallback"
            )
            records.extend(self._run_fallback(self._fallback, text))

        Log.info(f"Extraction complete: {len(records)} markers")
        return records

    def normalize_fallback_markers(
        self, raw_markers: Sequence[Mapping[str, object]]
    ) -> list[CanonicalMarkerRecord]:
        """Validate untrusted marker dicts and convert the survivors to SI."""
        return [self.to_record(m) for m in validate_markers(raw_markers)]

    def to_record(self, measurement: RawMeasurement) -> CanonicalMarkerRecord:
        """Attach a code, category and SI value to one measurement.

        The code is used for the unit lookup; the name is tried when the
        code has no rule for this unit.
        """
        code = measurement.code or derive_code_from_name(measurement.name)
        marker_key = code
        if self._converter.lookup(code, measurement.unit) is None:
            if self._converter.lookup(measurement.name, measurement.unit) is not None:
                marker_key = measurement.name
            elif measurement.unit and not is_si_unit(measurement.unit):
                Log.debug(
                    f"No SI conversion for {code!r} in {measurement.unit!r}, passing through"
                )
        si = self._converter.convert(marker_key, measurement.value, measurement.unit)
        return CanonicalMarkerRecord(
            code=code,
            name=measurement.name,
            value=measurement.value,
            unit=measurement.unit,
            value_si=si.value,
            unit_si=si.unit,
            ref_range_low=measurement.ref_range_low,
            ref_range_high=measurement.ref_range_high,
            category=measurement.category or category_for_code(code),
            flag=measurement.flag,
        )

    def _run_fallback(
        self, fallback: BaseMarkerFallback, text: str
    ) -> list[CanonicalMarkerRecord]:
        try:
            raw_markers = fallback.extract_markers(text)
        except FallbackError as exc:
            Log.warning(f"Fallback extraction failed: {exc}")
            return []
        records = self.normalize_fallback_markers(raw_markers)
        Log.info(f"Fallback returned {len(records)} valid markers")
        return records


def build_extractor(
    settings: Settings,
    catalog: MarkerCatalog | None = None,
) -> TextExtractor:
    """Build a TextExtractor with the configured fallback adapter."""
    return TextExtractor(
        catalog=catalog,
        converter=UnitConverter(),
        fallback=FallbackFactory.create(settings),
        min_markers=settings.fallback_min_markers,
        reference_window=settings.reference_window_chars,
    )
