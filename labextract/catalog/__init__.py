from labextract.catalog.catalog import MarkerCatalog, default_catalog
from labextract.catalog.models import CompiledMarker, MarkerDefinition, ReferenceRange

__all__ = [
    "CompiledMarker",
    "MarkerCatalog",
    "MarkerDefinition",
    "ReferenceRange",
    "default_catalog",
]
