"""Static marker/unit conversion rules.

Keys are ``"{marker_key}_{unit_key}"`` where the marker key is the canonical
name produced by ``normalize_marker_key`` and the unit key is the lowercased,
whitespace-free unit with micro signs folded to ``u``.
"""

from labextract.units.models import Conversion

SI_UNITS: frozenset[str] = frozenset(
    {"mmol/l", "umol/l", "nmol/l", "pmol/l", "g/l", "%"}
)

MARKER_ALIASES: dict[str, str] = {
    # lipids
    "total_cholesterol": "cholesterol",
    "cholesterol_total": "cholesterol",
    "chol": "cholesterol",
    "tc": "cholesterol",
    "ldl": "ldl_cholesterol",
    "ldl_c": "ldl_cholesterol",
    "hdl": "hdl_cholesterol",
    "hdl_c": "hdl_cholesterol",
    "trig": "triglycerides",
    "trigs": "triglycerides",
    "triglyceride": "triglycerides",
    "tg": "triglycerides",
    # metabolic
    "glu": "glucose",
    "gluc": "glucose",
    "blood_glucose": "glucose",
    "fasting_glucose": "glucose",
    "fasting_blood_sugar": "glucose",
    "blood_sugar": "glucose",
    "fbs": "glucose",
    "creat": "creatinine",
    "cr": "creatinine",
    "serum_creatinine": "creatinine",
    "blood_urea_nitrogen": "bun",
    "urea_nitrogen": "bun",
    "urea": "bun",
    "ca": "calcium",
    "serum_calcium": "calcium",
    "ua": "uric_acid",
    "urate": "uric_acid",
    # cbc
    "hgb": "hemoglobin",
    "hb": "hemoglobin",
    "haemoglobin": "hemoglobin",
    "white_blood_cell_count": "wbc",
    "white_blood_cells": "wbc",
    "white_blood_cell": "wbc",
    "total_wbc_count": "wbc",
    "leukocytes": "wbc",
    "red_blood_cell_count": "rbc",
    "red_blood_cells": "rbc",
    "red_blood_cell": "rbc",
    "erythrocytes": "rbc",
    "plt": "platelets",
    "platelet": "platelets",
    "platelet_count": "platelets",
    "mean_corpuscular_hemoglobin_concentration": "mchc",
    "neut": "neutrophils",
    "lymph": "lymphocytes",
    "mono": "monocytes",
    "eos": "eosinophils",
    "baso": "basophils",
    # thyroid
    "thyroid_stimulating_hormone": "tsh",
    "thyrotropin": "tsh",
    "t4": "free_t4",
    "ft4": "free_t4",
    "t3": "free_t3",
    "ft3": "free_t3",
    # vitamins, iron, inflammation
    "vit_d": "vitamin_d",
    "vitd": "vitamin_d",
    "25_oh_vitamin_d": "vitamin_d",
    "vit_b12": "vitamin_b12",
    "b12": "vitamin_b12",
    "cobalamin": "vitamin_b12",
    "ferr": "ferritin",
    "serum_ferritin": "ferritin",
    "c_reactive_protein": "crp",
}


def _rules(
    markers: tuple[str, ...],
    units: tuple[str, ...],
    conversion: Conversion,
) -> dict[str, Conversion]:
    return {f"{m}_{u}": conversion for m in markers for u in units}


_CELL_COUNT_MARKERS = (
    "wbc",
    "platelets",
    "neutrophils",
    "lymphocytes",
    "monocytes",
    "eosinophils",
    "basophils",
)

CONVERSIONS: dict[str, Conversion] = {
    "glucose_mg/dl": Conversion(18, "divide", "mmol/L"),
    **_rules(
        ("cholesterol", "ldl_cholesterol", "hdl_cholesterol"),
        ("mg/dl",),
        Conversion(38.67, "divide", "mmol/L"),
    ),
    "triglycerides_mg/dl": Conversion(88.57, "divide", "mmol/L"),
    "creatinine_mg/dl": Conversion(88.4, "multiply", "µmol/L"),
    "bun_mg/dl": Conversion(0.357, "multiply", "mmol/L"),
    "calcium_mg/dl": Conversion(0.25, "multiply", "mmol/L"),
    "uric_acid_mg/dl": Conversion(59.48, "multiply", "µmol/L"),
    "hemoglobin_g/dl": Conversion(10, "multiply", "g/L"),
    "mchc_g/dl": Conversion(10, "multiply", "g/L"),
    "vitamin_d_ng/ml": Conversion(2.496, "multiply", "nmol/L"),
    "vitamin_b12_pg/ml": Conversion(0.738, "multiply", "pmol/L"),
    "ferritin_ng/ml": Conversion(1, "multiply", "µg/L"),
    "free_t4_ng/dl": Conversion(12.87, "multiply", "pmol/L"),
    "free_t3_pg/ml": Conversion(1.536, "multiply", "pmol/L"),
    **_rules(("tsh",), ("uiu/ml", "miu/l"), Conversion(1, "multiply", "mIU/L")),
    "crp_mg/dl": Conversion(10, "multiply", "mg/L"),
    **_rules(
        _CELL_COUNT_MARKERS,
        ("k/ul", "x10^3/ul", "10^3/ul", "x10^9/l", "10^9/l"),
        Conversion(1, "multiply", "x10^9/L"),
    ),
    **_rules(
        ("rbc",),
        ("m/ul", "x10^6/ul", "10^6/ul", "x10^12/l", "10^12/l"),
        Conversion(1, "multiply", "x10^12/L"),
    ),
}

# Plausible values per marker key and unit key; a value outside its range
# usually means the wrong number or unit was read.
REASONABLE_RANGES: dict[str, dict[str, tuple[float, float]]] = {
    "cholesterol": {"mg/dl": (100, 400), "mmol/l": (2.6, 10.4)},
    "ldl_cholesterol": {"mg/dl": (50, 300), "mmol/l": (1.3, 7.8)},
    "hdl_cholesterol": {"mg/dl": (20, 100), "mmol/l": (0.5, 2.6)},
    "glucose": {"mg/dl": (50, 400), "mmol/l": (2.8, 22.2)},
    "creatinine": {"mg/dl": (0.3, 5.0), "umol/l": (26, 442)},
    "tsh": {"miu/l": (0.1, 20)},
    "hemoglobin": {"g/dl": (8, 20), "g/l": (80, 200)},
}
