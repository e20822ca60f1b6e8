_CATEGORIES: dict[str, str] = {
    "HGB": "CBC",
    "RBC": "CBC",
    "WBC": "CBC",
    "PLT": "CBC",
    "HCT": "CBC",
    "MCV": "CBC",
    "MCH": "CBC",
    "MCHC": "CBC",
    "GLU": "Chemistry",
    "CREAT": "Chemistry",
    "BUN": "Chemistry",
    "CA": "Chemistry",
    "UA": "Chemistry",
    "AST": "Chemistry",
    "ALT": "Chemistry",
    "CHOL": "Lipid Panel",
    "HDL": "Lipid Panel",
    "LDL": "Lipid Panel",
    "TRIG": "Lipid Panel",
    "CRP": "Inflammatory Markers",
    "ESR": "Inflammatory Markers",
}

DEFAULT_CATEGORY = "Other"


def category_for_code(code: str) -> str:
    """Display category for a marker code; ``Other`` when unknown."""
    return _CATEGORIES.get(code, DEFAULT_CATEGORY)
