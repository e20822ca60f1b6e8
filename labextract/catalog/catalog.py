"""Immutable marker catalog with eagerly compiled matchers."""

import re
from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import ClassVar

from labextract.catalog.data import DEFAULT_MARKERS
from labextract.catalog.exceptions import CatalogError
from labextract.catalog.models import CompiledMarker, MarkerDefinition
from labextract.logging.logger import Log


class MarkerCatalog:
    """Read-only collection of MarkerDefinitions.

    Every synonym alternation and extraction pattern is compiled once here.
    An entry whose patterns do not compile is kept for lookups but excluded
    from ``compiled()``, so it can never break an extraction pass.
    """

    UNIT_PATTERN: ClassVar[str] = (
        r"[x×]\s?10\^?\d+/[A-Za-zµμ]+"
        r"|10\^\d+/[A-Za-zµμ]+"
        r"|[A-Za-z%µμ][A-Za-z0-9/^%µμ.\-]*"
    )
    MEASUREMENT_TEMPLATE: ClassVar[str] = (
        r"(?<![A-Za-z])(?P<synonym>{synonyms})(?![A-Za-z])"
        r"\s*[:=]?\s*"
        r"(?P<value>\d+(?:\.\d+)?)"
        r"(?:[ \t]*(?P<flag>(?-i:[HL]))(?![A-Za-z0-9/]))?"
        r"(?:[ \t]*(?P<unit>{unit}))?"
    )

    def __init__(self, definitions: Iterable[MarkerDefinition]) -> None:
        self._definitions: tuple[MarkerDefinition, ...] = tuple(definitions)
        self._by_code: dict[str, MarkerDefinition] = {}
        for definition in self._definitions:
            if not definition.code:
                raise CatalogError(f"Marker '{definition.name}' has an empty code")
            if definition.code in self._by_code:
                raise CatalogError(f"Duplicate marker code: {definition.code}")
            self._by_code[definition.code] = definition

        compiled: list[CompiledMarker] = []
        broken: set[str] = set()
        for definition in self._definitions:
            try:
                compiled.append(self._compile(definition))
            except (re.error, CatalogError) as exc:
                Log.warning(f"Skipping catalog entry {definition.code}: {exc}")
                broken.add(definition.code)
        self._compiled = tuple(compiled)
        self._broken = frozenset(broken)
        self._by_synonym: dict[str, MarkerDefinition] = {}
        for definition in self._definitions:
            for synonym in (definition.code, *definition.synonyms):
                self._by_synonym.setdefault(_fold(synonym), definition)

    @property
    def definitions(self) -> tuple[MarkerDefinition, ...]:
        return self._definitions

    @property
    def broken_codes(self) -> frozenset[str]:
        """Codes whose synonyms or patterns failed to compile."""
        return self._broken

    def by_panel(self, panel: str) -> list[MarkerDefinition]:
        """Return all definitions tagged with *panel*, in catalog order."""
        return [d for d in self._definitions if d.panel == panel]

    def by_code(self, code: str) -> MarkerDefinition | None:
        """Return the definition with exactly this code, if any."""
        return self._by_code.get(code)

    def by_synonym(self, text: str) -> MarkerDefinition | None:
        """Return the definition whose code or synonym equals *text*.

        Comparison ignores case and runs of whitespace.
        """
        return self._by_synonym.get(_fold(text))

    def compiled(self) -> tuple[CompiledMarker, ...]:
        """Return the compiled matchers of every well-formed entry."""
        return self._compiled

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[MarkerDefinition]:
        return iter(self._definitions)

    @classmethod
    def _compile(cls, definition: MarkerDefinition) -> CompiledMarker:
        synonyms = sorted(
            {s.strip().lower() for s in definition.synonyms if s.strip()},
            key=len,
            reverse=True,
        )
        if not synonyms:
            raise CatalogError("no synonyms defined")
        alternation = "|".join(cls._synonym_regex(s) for s in synonyms)
        synonym_pattern = re.compile(
            cls.MEASUREMENT_TEMPLATE.format(synonyms=alternation, unit=cls.UNIT_PATTERN),
            re.IGNORECASE,
        )
        extraction_patterns = tuple(
            re.compile(p, re.IGNORECASE) for p in definition.extraction_patterns
        )
        excluded_prefix = None
        if definition.excluded_prefixes:
            prefixes = "|".join(
                cls._synonym_regex(p.lower()) for p in definition.excluded_prefixes
            )
            excluded_prefix = re.compile(
                rf"(?<![A-Za-z])(?:{prefixes})[\s\-]*\Z", re.IGNORECASE
            )
        return CompiledMarker(
            definition=definition,
            synonym_pattern=synonym_pattern,
            extraction_patterns=extraction_patterns,
            excluded_prefix=excluded_prefix,
        )

    @staticmethod
    def _synonym_regex(synonym: str) -> str:
        return r"\s+".join(re.escape(part) for part in synonym.split())


def _fold(text: str) -> str:
    return " ".join(text.split()).lower()


@lru_cache(maxsize=1)
def default_catalog() -> MarkerCatalog:
    """Return the process-wide catalog built from the bundled definitions."""
    return MarkerCatalog(DEFAULT_MARKERS)
