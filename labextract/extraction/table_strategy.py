"""Strategy B: tabular ``name value [flag] [unit] low - high`` rows."""

import re
from collections.abc import Sequence
from typing import ClassVar

from labextract.catalog.catalog import MarkerCatalog
from labextract.extraction.base import BaseExtractionStrategy
from labextract.extraction.categories import category_for_code
from labextract.extraction.code_deriver import derive_code_from_name
from labextract.extraction.models import RawMeasurement
from labextract.logging.logger import Log


class TableRowStrategy(BaseExtractionStrategy):
    """Matches one result row per line; the test name need not be catalogued.

    A row whose name equals (exactly) the name of an earlier measurement is
    skipped, so the first occurrence wins.
    """

    name = "table"

    ROW_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<name>[A-Za-z][A-Za-z0-9\s\-()]*?)\s+"
        r"(?P<value>\d+(?:\.\d+)?)"
        r"(?:\s+(?P<flag>[HL])(?![\w/]))?"
        r"(?:\s+(?P<unit>[A-Za-z%µμ][A-Za-z0-9/^%µμ.]*))?"
        r"\s+(?P<low>\d+(?:\.\d+)?)\s*[-–—]\s*(?P<high>\d+(?:\.\d+)?)"
    )

    def __init__(self, catalog: MarkerCatalog | None = None) -> None:
        self._catalog = catalog

    def extract(
        self,
        text: str,
        existing: Sequence[RawMeasurement] = (),
    ) -> list[RawMeasurement]:
        seen_names = {m.name for m in existing}
        found: list[RawMeasurement] = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            match = self.ROW_RE.match(line)
            if match is None:
                continue
            name = " ".join(match.group("name").split())
            if not name or name in seen_names:
                continue
            seen_names.add(name)
            code = self._resolve_code(name)
            found.append(
                RawMeasurement(
                    name=name,
                    code=code,
                    value=float(match.group("value")),
                    unit=match.group("unit") or "",
                    flag=match.group("flag") or None,
                    ref_range_low=float(match.group("low")),
                    ref_range_high=float(match.group("high")),
                    category=category_for_code(code),
                )
            )
            Log.debug(f"Table row {name!r} -> {code}")
        return found

    def _resolve_code(self, name: str) -> str:
        if self._catalog is not None:
            definition = self._catalog.by_synonym(name)
            if definition is not None:
                return definition.code
        return derive_code_from_name(name)
