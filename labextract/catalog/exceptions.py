class CatalogError(Exception):
    """Raised when a marker catalog is constructed from invalid definitions."""
