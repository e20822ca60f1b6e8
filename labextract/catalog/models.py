import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReferenceRange:
    """Reference range for a marker, expressed in its canonical SI unit."""

    min: float | None = None
    max: float | None = None
    unit: str = ""


@dataclass(frozen=True)
class MarkerDefinition:
    """A known lab test: how it is spelled in reports and how it is normalized."""

    panel: str
    code: str
    name: str
    synonyms: tuple[str, ...] = ()
    extraction_patterns: tuple[str, ...] = ()
    canonical_unit: str = ""
    reference_range: ReferenceRange | None = None
    # words that, printed right before a synonym, name a different test
    excluded_prefixes: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompiledMarker:
    """Precompiled regexes for one catalog entry."""

    definition: MarkerDefinition
    synonym_pattern: re.Pattern[str]
    extraction_patterns: tuple[re.Pattern[str], ...] = field(default_factory=tuple)
    excluded_prefix: re.Pattern[str] | None = None
