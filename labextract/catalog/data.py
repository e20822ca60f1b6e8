"""Built-in marker catalog.

Synonyms are matched case-insensitively on word boundaries; extraction
patterns are tried only when no synonym-anchored measurement is found and
must capture the numeric value in group 1.
"""

from labextract.catalog.models import MarkerDefinition, ReferenceRange

_NUMBER = r"(\d+(?:\.\d+)?)"
_SEP = r"\s*[:=]?\s*"


def _pattern(label: str) -> str:
    return rf"\b{label}{_SEP}{_NUMBER}"


DEFAULT_MARKERS: tuple[MarkerDefinition, ...] = (
    # Lipid panel
    MarkerDefinition(
        panel="lipid",
        code="CHOL",
        name="Total Cholesterol",
        synonyms=("total cholesterol", "cholesterol", "chol"),
        extraction_patterns=(_pattern(r"cholesterol"), _pattern(r"chol")),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=3.9, max=5.2, unit="mmol/L"),
        excluded_prefixes=("hdl", "ldl", "vldl"),
    ),
    MarkerDefinition(
        panel="lipid",
        code="HDL",
        name="HDL Cholesterol",
        synonyms=("hdl cholesterol", "hdl-c", "hdl", "high density lipoprotein"),
        extraction_patterns=(
            _pattern(r"hdl"),
            _pattern(r"high\s+density\s+lipoprotein"),
        ),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=1.0, max=2.6, unit="mmol/L"),
    ),
    MarkerDefinition(
        panel="lipid",
        code="LDL",
        name="LDL Cholesterol",
        synonyms=("ldl cholesterol", "ldl-c", "ldl", "low density lipoprotein"),
        extraction_patterns=(
            _pattern(r"ldl"),
            _pattern(r"low\s+density\s+lipoprotein"),
        ),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=1.8, max=3.4, unit="mmol/L"),
    ),
    MarkerDefinition(
        panel="lipid",
        code="TRIG",
        name="Triglycerides",
        synonyms=("triglycerides", "triglyceride", "trigs", "trig", "tg"),
        extraction_patterns=(_pattern(r"triglycerides?"), _pattern(r"trig")),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=0.4, max=1.7, unit="mmol/L"),
    ),
    # Basic metabolic panel
    MarkerDefinition(
        panel="metabolic",
        code="GLU",
        name="Glucose",
        synonyms=(
            "fasting blood sugar",
            "blood glucose",
            "blood sugar",
            "glucose",
            "fbs",
            "glu",
        ),
        extraction_patterns=(
            _pattern(r"glucose"),
            _pattern(r"blood\s+glucose"),
        ),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=3.9, max=5.6, unit="mmol/L"),
    ),
    MarkerDefinition(
        panel="metabolic",
        code="BUN",
        name="Blood Urea Nitrogen",
        synonyms=("blood urea nitrogen", "urea nitrogen", "bun", "urea"),
        extraction_patterns=(
            _pattern(r"bun"),
            _pattern(r"blood\s+urea\s+nitrogen"),
        ),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=2.5, max=7.1, unit="mmol/L"),
    ),
    MarkerDefinition(
        panel="metabolic",
        code="CREAT",
        name="Creatinine",
        synonyms=("serum creatinine", "creatinine", "creat", "cr"),
        extraction_patterns=(_pattern(r"creatinine"), _pattern(r"creat")),
        canonical_unit="µmol/L",
        reference_range=ReferenceRange(min=62, max=106, unit="µmol/L"),
    ),
    MarkerDefinition(
        panel="metabolic",
        code="CA",
        name="Calcium",
        synonyms=("serum calcium", "calcium", "ca"),
        extraction_patterns=(_pattern(r"calcium"),),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=2.15, max=2.55, unit="mmol/L"),
    ),
    MarkerDefinition(
        panel="metabolic",
        code="UA",
        name="Uric Acid",
        synonyms=("uric acid", "urate"),
        extraction_patterns=(_pattern(r"uric\s+acid"),),
        canonical_unit="µmol/L",
        reference_range=ReferenceRange(min=200, max=430, unit="µmol/L"),
    ),
    # Liver function
    MarkerDefinition(
        panel="liver",
        code="ALT",
        name="Alanine Aminotransferase",
        synonyms=("alanine aminotransferase", "sgpt", "alt"),
        extraction_patterns=(
            _pattern(r"alt"),
            _pattern(r"alanine\s+aminotransferase"),
        ),
        canonical_unit="U/L",
        reference_range=ReferenceRange(min=7, max=56, unit="U/L"),
    ),
    MarkerDefinition(
        panel="liver",
        code="AST",
        name="Aspartate Aminotransferase",
        synonyms=("aspartate aminotransferase", "sgot", "ast"),
        extraction_patterns=(
            _pattern(r"ast"),
            _pattern(r"aspartate\s+aminotransferase"),
        ),
        canonical_unit="U/L",
        reference_range=ReferenceRange(min=10, max=40, unit="U/L"),
    ),
    # Thyroid panel
    MarkerDefinition(
        panel="thyroid",
        code="TSH",
        name="Thyroid Stimulating Hormone",
        synonyms=("thyroid stimulating hormone", "thyrotropin", "tsh"),
        extraction_patterns=(
            _pattern(r"tsh"),
            _pattern(r"thyroid\s+stimulating\s+hormone"),
        ),
        canonical_unit="mIU/L",
        reference_range=ReferenceRange(min=0.4, max=4.0, unit="mIU/L"),
    ),
    MarkerDefinition(
        panel="thyroid",
        code="T4",
        name="Free T4",
        synonyms=("free t4", "free thyroxine", "ft4"),
        extraction_patterns=(_pattern(r"free\s+t4"), _pattern(r"ft4")),
        canonical_unit="pmol/L",
        reference_range=ReferenceRange(min=12, max=22, unit="pmol/L"),
    ),
    MarkerDefinition(
        panel="thyroid",
        code="T3",
        name="Free T3",
        synonyms=("free t3", "free triiodothyronine", "ft3"),
        extraction_patterns=(_pattern(r"free\s+t3"), _pattern(r"ft3")),
        canonical_unit="pmol/L",
        reference_range=ReferenceRange(min=3.1, max=6.8, unit="pmol/L"),
    ),
    # Complete blood count
    MarkerDefinition(
        panel="cbc",
        code="WBC",
        name="White Blood Cell Count",
        synonyms=(
            "total wbc count",
            "white blood cells",
            "white blood cell",
            "leukocytes",
            "wbc",
        ),
        extraction_patterns=(
            _pattern(r"wbc"),
            _pattern(r"white\s+blood\s+cells?"),
        ),
        canonical_unit="x10^9/L",
        reference_range=ReferenceRange(min=4.0, max=11.0, unit="x10^9/L"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="RBC",
        name="Red Blood Cell Count",
        synonyms=(
            "red blood cells",
            "red blood cell",
            "red cell count",
            "erythrocytes",
            "rbc",
        ),
        extraction_patterns=(
            _pattern(r"rbc"),
            _pattern(r"red\s+blood\s+cells?"),
        ),
        canonical_unit="x10^12/L",
        reference_range=ReferenceRange(min=4.2, max=5.4, unit="x10^12/L"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="HGB",
        name="Hemoglobin",
        synonyms=("hemoglobin", "haemoglobin", "hgb", "hb"),
        extraction_patterns=(_pattern(r"ha?emoglobin"), _pattern(r"hgb")),
        canonical_unit="g/L",
        reference_range=ReferenceRange(min=120, max=160, unit="g/L"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="HCT",
        name="Hematocrit",
        synonyms=("hematocrit", "haematocrit", "packed cell volume", "pcv", "hct"),
        extraction_patterns=(_pattern(r"ha?ematocrit"), _pattern(r"hct")),
        canonical_unit="%",
        reference_range=ReferenceRange(min=36, max=46, unit="%"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="PLT",
        name="Platelet Count",
        synonyms=("platelet count", "platelets", "platelet", "plt"),
        extraction_patterns=(_pattern(r"platelets?"), _pattern(r"plt")),
        canonical_unit="x10^9/L",
        reference_range=ReferenceRange(min=150, max=400, unit="x10^9/L"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="MCV",
        name="Mean Corpuscular Volume",
        synonyms=("mean corpuscular volume", "mean cell volume", "mcv"),
        extraction_patterns=(_pattern(r"mcv"),),
        canonical_unit="fL",
        reference_range=ReferenceRange(min=80, max=100, unit="fL"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="MCHC",
        name="Mean Corpuscular Hemoglobin Concentration",
        synonyms=("mean corpuscular hemoglobin concentration", "mchc"),
        extraction_patterns=(_pattern(r"mchc"),),
        canonical_unit="g/L",
        reference_range=ReferenceRange(min=320, max=360, unit="g/L"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="MCH",
        name="Mean Corpuscular Hemoglobin",
        synonyms=("mean corpuscular hemoglobin", "mch"),
        extraction_patterns=(_pattern(r"mch"),),
        canonical_unit="pg",
        reference_range=ReferenceRange(min=27, max=33, unit="pg"),
    ),
    MarkerDefinition(
        panel="cbc",
        code="NEUT",
        name="Neutrophils",
        synonyms=("neutrophil count", "neutrophils", "neut"),
        extraction_patterns=(_pattern(r"neutrophils?"),),
        canonical_unit="x10^9/L",
    ),
    MarkerDefinition(
        panel="cbc",
        code="LYMPH",
        name="Lymphocytes",
        synonyms=("lymphocyte count", "lymphocytes", "lymph"),
        extraction_patterns=(_pattern(r"lymphocytes?"),),
        canonical_unit="x10^9/L",
    ),
    MarkerDefinition(
        panel="cbc",
        code="MONO",
        name="Monocytes",
        synonyms=("monocyte count", "monocytes", "mono"),
        extraction_patterns=(_pattern(r"monocytes?"),),
        canonical_unit="x10^9/L",
    ),
    MarkerDefinition(
        panel="cbc",
        code="EOS",
        name="Eosinophils",
        synonyms=("eosinophil count", "eosinophils", "eos"),
        extraction_patterns=(_pattern(r"eosinophils?"),),
        canonical_unit="x10^9/L",
    ),
    MarkerDefinition(
        panel="cbc",
        code="BASO",
        name="Basophils",
        synonyms=("basophil count", "basophils", "baso"),
        extraction_patterns=(_pattern(r"basophils?"),),
        canonical_unit="x10^9/L",
    ),
    # Vitamins and iron stores
    MarkerDefinition(
        panel="vitamins",
        code="VIT_D",
        name="Vitamin D",
        synonyms=("25-oh vitamin d", "vitamin d", "calcidiol"),
        extraction_patterns=(
            _pattern(r"vitamin\s+d"),
            _pattern(r"25-oh\s+vitamin\s+d"),
        ),
        canonical_unit="nmol/L",
        reference_range=ReferenceRange(min=75, max=250, unit="nmol/L"),
    ),
    MarkerDefinition(
        panel="vitamins",
        code="VIT_B12",
        name="Vitamin B12",
        synonyms=("vitamin b12", "cobalamin", "b12"),
        extraction_patterns=(_pattern(r"vitamin\s+b12"), _pattern(r"b12")),
        canonical_unit="pmol/L",
        reference_range=ReferenceRange(min=148, max=664, unit="pmol/L"),
    ),
    MarkerDefinition(
        panel="vitamins",
        code="FERR",
        name="Ferritin",
        synonyms=("serum ferritin", "ferritin"),
        extraction_patterns=(_pattern(r"ferritin"),),
        canonical_unit="µg/L",
        reference_range=ReferenceRange(min=30, max=400, unit="µg/L"),
    ),
    # Inflammatory markers
    MarkerDefinition(
        panel="inflammatory",
        code="CRP",
        name="C-Reactive Protein",
        synonyms=("c-reactive protein", "c reactive protein", "crp"),
        extraction_patterns=(_pattern(r"crp"), _pattern(r"c-?\s*reactive\s+protein")),
        canonical_unit="mg/L",
        reference_range=ReferenceRange(min=0, max=5, unit="mg/L"),
    ),
)
