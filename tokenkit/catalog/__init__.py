"""Design-token catalog: immutable dataset plus loaders."""

from .base import Catalog, CatalogError, TokenNotFoundError
from .data import default_catalog
from .loader import catalog_from_mapping, load_catalog

__all__ = [
    "Catalog",
    "CatalogError",
    "TokenNotFoundError",
    "catalog_from_mapping",
    "default_catalog",
    "load_catalog",
]
