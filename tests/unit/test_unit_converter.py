"""Tests for raw value to SI conversion."""

import logging
import math

import pytest

from labextract.units.converter import (
    UnitConverter,
    convert_to_si,
    is_si_unit,
    normalize_marker_key,
    normalize_unit_key,
)
from labextract.units.models import Conversion, SIValue


class TestKnownConversions:
    def test_glucose_mg_dl_to_mmol_l(self) -> None:
        assert convert_to_si("glucose", 90, "mg/dL") == SIValue(value=5.0, unit="mmol/L")

    def test_creatinine_mg_dl_to_umol_l(self) -> None:
        assert convert_to_si("creatinine", 1.0, "mg/dL") == SIValue(value=88.4, unit="µmol/L")

    def test_hemoglobin_g_dl_to_g_l(self) -> None:
        result = convert_to_si("hemoglobin", 14.3, "g/dL")
        assert result.value == 143
        assert result.unit == "g/L"

    def test_rounds_to_two_decimals(self) -> None:
        result = convert_to_si("Total Cholesterol", 200, "mg/dL")
        assert result == SIValue(value=5.17, unit="mmol/L")

    def test_vitamin_d_multiplies(self) -> None:
        assert convert_to_si("Vitamin D", 30, "ng/mL") == SIValue(value=74.88, unit="nmol/L")

    def test_cell_counts_restate_unit(self) -> None:
        assert convert_to_si("WBC", 6.1, "K/uL") == SIValue(value=6.1, unit="x10^9/L")

    def test_marker_code_resolves_through_alias(self) -> None:
        assert convert_to_si("GLU", 90, "mg/dL") == SIValue(value=5.0, unit="mmol/L")
        assert convert_to_si("HGB", 14.3, "g/dL").value == 143

    def test_unit_whitespace_and_case_ignored(self) -> None:
        assert convert_to_si("LDL", 130, " MG / dl ") == SIValue(value=3.36, unit="mmol/L")

    def test_both_micro_signs_are_accepted(self) -> None:
        assert convert_to_si("TSH", 2.5, "µIU/mL") == SIValue(value=2.5, unit="mIU/L")
        assert convert_to_si("TSH", 2.5, "μIU/mL") == SIValue(value=2.5, unit="mIU/L")

    def test_numeric_string_is_converted(self) -> None:
        assert convert_to_si("glucose", "90", "mg/dL") == SIValue(value=5.0, unit="mmol/L")


class TestPassThrough:
    def test_already_si_value_is_unchanged(self) -> None:
        assert convert_to_si("glucose", 5.6, "mmol/L") == SIValue(value=5.6, unit="mmol/L")

    def test_already_si_micro_unit_is_unchanged(self) -> None:
        assert convert_to_si("creatinine", 88, "µmol/L") == SIValue(value=88, unit="µmol/L")

    def test_unknown_unit_is_unchanged(self) -> None:
        assert convert_to_si("glucose", 42, "furlongs") == SIValue(value=42, unit="furlongs")

    def test_unknown_marker_is_unchanged(self) -> None:
        assert convert_to_si("lipase", 45, "U/L") == SIValue(value=45, unit="U/L")

    def test_text_value_is_unchanged(self) -> None:
        assert convert_to_si("glucose", "positive", "mg/dL") == SIValue(
            value="positive", unit="mg/dL"
        )

    def test_nan_value_is_unchanged(self) -> None:
        result = convert_to_si("glucose", float("nan"), "mg/dL")
        assert isinstance(result.value, float)
        assert math.isnan(result.value)
        assert result.unit == "mg/dL"

    def test_boolean_value_is_not_treated_as_number(self) -> None:
        assert convert_to_si("glucose", True, "mg/dL") == SIValue(value=True, unit="mg/dL")

    def test_none_value_is_unchanged(self) -> None:
        assert convert_to_si("glucose", None, "mg/dL") == SIValue(value=None, unit="mg/dL")

    def test_is_deterministic(self) -> None:
        assert convert_to_si("glucose", 101, "mg/dL") == convert_to_si("glucose", 101, "mg/dL")


class TestNormalization:
    def test_marker_key_collapses_aliases(self) -> None:
        assert normalize_marker_key("Total Cholesterol") == "cholesterol"
        assert normalize_marker_key("total_cholesterol") == "cholesterol"
        assert normalize_marker_key("LDL") == "ldl_cholesterol"
        assert normalize_marker_key("C-Reactive Protein") == "crp"

    def test_marker_key_strips_punctuation(self) -> None:
        assert normalize_marker_key("  Unknown Marker! ") == "unknown_marker"

    def test_marker_key_keeps_unknown_names(self) -> None:
        assert normalize_marker_key("Vitamin D") == "vitamin_d"

    def test_unit_key(self) -> None:
        assert normalize_unit_key(" mg / dL ") == "mg/dl"
        assert normalize_unit_key("µmol/L") == "umol/l"
        assert normalize_unit_key("μmol/L") == "umol/l"

    def test_is_si_unit(self) -> None:
        assert is_si_unit("mmol/L")
        assert is_si_unit("µmol/L")
        assert is_si_unit("%")
        assert not is_si_unit("mg/dL")


class TestUnitConverter:
    def test_uses_injected_table(self) -> None:
        converter = UnitConverter(
            conversions={"widget_foo": Conversion(2, "multiply", "bar")},
            aliases={},
        )
        assert converter.convert("Widget", 3, "FOO") == SIValue(value=6.0, unit="bar")

    def test_divide_operation(self) -> None:
        converter = UnitConverter(
            conversions={"widget_foo": Conversion(4, "divide", "bar")},
            aliases={},
        )
        assert converter.convert("widget", 10, "foo") == SIValue(value=2.5, unit="bar")

    def test_lookup_returns_none_for_unknown_pair(self) -> None:
        assert UnitConverter().lookup("glucose", "furlongs") is None

    def test_lookup_returns_rule(self) -> None:
        rule = UnitConverter().lookup("Glucose", "mg/dL")
        assert rule == Conversion(18, "divide", "mmol/L")


class TestFromSI:
    def test_glucose_back_to_mg_dl(self) -> None:
        assert UnitConverter().from_si("glucose", 5.0, "mg/dL") == 90.0

    def test_multiplied_rule_is_divided_back(self) -> None:
        converter = UnitConverter()
        assert converter.from_si("CREAT", 88.4, "mg/dL") == 1.0
        assert converter.from_si("hemoglobin", 143, "g/dL") == 14.3

    def test_unknown_unit_returns_number(self) -> None:
        assert UnitConverter().from_si("widget", 3, "furlongs") == 3.0

    def test_non_numeric_value_returns_none(self) -> None:
        assert UnitConverter().from_si("glucose", "n/a", "mg/dL") is None
        assert UnitConverter().from_si("glucose", float("nan"), "mg/dL") is None


class TestUnitMetadata:
    def test_canonical_unit(self) -> None:
        converter = UnitConverter()
        assert converter.canonical_unit("GLU") == "mmol/L"
        assert converter.canonical_unit("creatinine") == "µmol/L"
        assert converter.canonical_unit("widget") == ""

    def test_supported_units_include_si_unit(self) -> None:
        assert UnitConverter().supported_units("glucose") == ["mg/dl", "mmol/l"]

    def test_supported_units_do_not_repeat_si_unit(self) -> None:
        assert sorted(UnitConverter().supported_units("TSH")) == ["miu/l", "uiu/ml"]

    def test_supported_units_for_unknown_marker(self) -> None:
        assert UnitConverter().supported_units("widget") == []

    def test_supported_units_from_injected_table(self) -> None:
        converter = UnitConverter(
            conversions={"widget_foo": Conversion(2, "multiply", "bar")},
            aliases={},
        )
        assert converter.supported_units("widget") == ["foo", "bar"]

    def test_is_valid_unit(self) -> None:
        converter = UnitConverter()
        assert converter.is_valid_unit("glucose", "mg/dL")
        assert converter.is_valid_unit("glucose", "mmol/L")
        assert not converter.is_valid_unit("glucose", "g/dL")
        assert not converter.is_valid_unit("widget", "mg/dL")


class TestConversionFactor:
    def test_raw_to_si(self) -> None:
        factor = UnitConverter().conversion_factor("glucose", "mg/dL", "mmol/L")
        assert factor == pytest.approx(1 / 18)

    def test_si_to_raw(self) -> None:
        factor = UnitConverter().conversion_factor("glucose", "mmol/L", "mg/dL")
        assert factor == pytest.approx(18)

    def test_multiplying_rule(self) -> None:
        factor = UnitConverter().conversion_factor("creatinine", "mg/dL", "µmol/L")
        assert factor == pytest.approx(88.4)

    def test_between_two_raw_units(self) -> None:
        factor = UnitConverter().conversion_factor("TSH", "uIU/mL", "mIU/L")
        assert factor == pytest.approx(1)

    def test_unsupported_unit_returns_none(self) -> None:
        assert UnitConverter().conversion_factor("glucose", "mg/dL", "g/L") is None
        assert UnitConverter().conversion_factor("widget", "a", "b") is None


class TestReasonableValue:
    def test_value_inside_range(self) -> None:
        converter = UnitConverter()
        assert converter.is_reasonable_value("glucose", 90, "mg/dL")
        assert converter.is_reasonable_value("GLU", 5.0, "mmol/L")
        assert converter.is_reasonable_value("TSH", 2.1, "mIU/L")

    def test_value_outside_range(self) -> None:
        converter = UnitConverter()
        assert not converter.is_reasonable_value("glucose", 900, "mg/dL")
        assert not converter.is_reasonable_value("hemoglobin", 14, "g/L")

    def test_negative_and_non_numeric_values(self) -> None:
        converter = UnitConverter()
        assert not converter.is_reasonable_value("glucose", -1, "mg/dL")
        assert not converter.is_reasonable_value("glucose", "high", "mg/dL")

    def test_marker_without_range_is_reasonable(self) -> None:
        assert UnitConverter().is_reasonable_value("ferritin", 5000, "ng/mL")

    def test_unit_without_range_is_reasonable(self) -> None:
        assert UnitConverter().is_reasonable_value("glucose", 9000, "g/L")


class TestConversionIsSilent:
    def test_unknown_unit_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="labextract")
        assert convert_to_si("glucose", 90, "furlongs") == SIValue(value=90, unit="furlongs")
        assert caplog.records == []
