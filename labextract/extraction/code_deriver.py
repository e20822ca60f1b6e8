"""Best-effort marker codes for test names that are not in the catalog."""

NAME_CODE_ALIASES: dict[str, str] = {
    "hemoglobin": "HGB",
    "haemoglobin": "HGB",
    "hgb": "HGB",
    "hb": "HGB",
    "red blood cell": "RBC",
    "rbc": "RBC",
    "white blood cell": "WBC",
    "wbc": "WBC",
    "platelet": "PLT",
    "plt": "PLT",
    "hematocrit": "HCT",
    "haematocrit": "HCT",
    "hct": "HCT",
    "mean corpuscular volume": "MCV",
    "mcv": "MCV",
    "mean corpuscular hemoglobin": "MCH",
    "mch": "MCH",
    "mean corpuscular hemoglobin concentration": "MCHC",
    "mchc": "MCHC",
    "glucose": "GLU",
    "fasting blood sugar": "GLU",
    "fbs": "GLU",
    "creatinine": "CREAT",
    "creat": "CREAT",
    "blood urea nitrogen": "BUN",
    "bun": "BUN",
    "urea": "BUN",
    "calcium": "CA",
    "ca": "CA",
    "sgot": "AST",
    "ast": "AST",
    "sgpt": "ALT",
    "alt": "ALT",
    "uric acid": "UA",
    "c-reactive protein": "CRP",
    "crp": "CRP",
}


def derive_code_from_name(name: str) -> str:
    """Derive a short code for *name*.

    Exact alias match first (case-insensitive, whitespace collapsed), then
    the initials of a multi-word name, then the first four characters of a
    single word.
    """
    words = name.split()
    alias = NAME_CODE_ALIASES.get(" ".join(words).lower())
    if alias is not None:
        return alias
    if len(words) > 1:
        initials = [next((ch for ch in w if ch.isalnum()), "") for w in words]
        return "".join(initials).upper()
    if words:
        return words[0][:4].upper()
    return ""
