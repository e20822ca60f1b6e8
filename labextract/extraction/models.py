from dataclasses import dataclass


@dataclass(frozen=True)
class RawMeasurement:
    """A single value found in a report, before unit normalization."""

    name: str
    value: float
    unit: str = ""
    code: str | None = None
    flag: str | None = None
    ref_range_low: float | None = None
    ref_range_high: float | None = None
    category: str | None = None


@dataclass(frozen=True)
class CanonicalMarkerRecord:
    """A recognized measurement with both raw and SI representations."""

    code: str
    name: str
    value: float
    unit: str
    value_si: float | str | None
    unit_si: str
    ref_range_low: float | None = None
    ref_range_high: float | None = None
    category: str | None = None
    flag: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Flat key/value form; unset optional fields are omitted."""
        data: dict[str, object] = {
            "code": self.code,
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "value_si": self.value_si,
            "unit_si": self.unit_si,
        }
        optional = {
            "ref_range_low": self.ref_range_low,
            "ref_range_high": self.ref_range_high,
            "category": self.category,
            "flag": self.flag,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data
