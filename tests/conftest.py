import pytest

from labextract.catalog.catalog import MarkerCatalog, default_catalog
from labextract.catalog.models import MarkerDefinition, ReferenceRange


@pytest.fixture()
def catalog() -> MarkerCatalog:
    return default_catalog()


@pytest.fixture()
def glucose_definition() -> MarkerDefinition:
    return MarkerDefinition(
        panel="metabolic",
        code="GLU",
        name="Glucose",
        synonyms=("glucose", "blood glucose"),
        extraction_patterns=(r"\bglucose\s*:?\s*(\d+(?:\.\d+)?)",),
        canonical_unit="mmol/L",
        reference_range=ReferenceRange(min=3.9, max=5.6, unit="mmol/L"),
    )


@pytest.fixture()
def broken_definition() -> MarkerDefinition:
    return MarkerDefinition(
        panel="metabolic",
        code="BROKEN",
        name="Broken Marker",
        synonyms=("broken",),
        extraction_patterns=(r"broken\s*(\d+",),
        canonical_unit="mmol/L",
    )


@pytest.fixture()
def sample_report_text() -> str:
    return (
        "COMPLETE BLOOD COUNT\n"
        "Hemoglobin 13.2 g/dL 12.0 - 16.0\n"
        "WBC 6.1 K/uL 4.0 - 11.0\n"
        "Platelets 250 K/uL 150 - 400\n"
        "\n"
        "CHEMISTRY\n"
        "Glucose 90 mg/dL 70 - 99\n"
        "Creatinine 1.0 mg/dL 0.6 - 1.2\n"
    )
